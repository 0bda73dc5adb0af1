"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from gql_graphene.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(
        "type Query { hello: String }\n"
        "type Mutation { ping: Boolean }\n"
        "type _Debug { trace: String }\n"
    )
    return path


class TestGenerateCommand:
    """Tests for `gql-graphene generate`."""

    def test_writes_output(self, runner, schema_file, tmp_path):
        out = tmp_path / "out" / "types.py"
        result = runner.invoke(main, ["generate", "-s", str(schema_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert f"Wrote file at {out}" in result.output
        content = out.read_text()
        assert content.startswith("from graphene import Schema, ObjectType, String, Boolean\n")
        assert content.endswith("schema = Schema(query=Query, mutation=Mutation)\n")

    def test_default_output_file(self, runner, schema_file, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            result = runner.invoke(main, ["generate", "--schema", str(schema_file)])
            assert result.exit_code == 0, result.output
            assert "class Query(ObjectType):" in (Path(cwd) / "gen.py").read_text()

    def test_no_schema_wiring(self, runner, schema_file, tmp_path):
        out = tmp_path / "gen.py"
        result = runner.invoke(
            main, ["generate", "-s", str(schema_file), "-o", str(out), "--no-schema-wiring"]
        )
        assert result.exit_code == 0, result.output
        content = out.read_text()
        assert "schema = " not in content
        assert "Schema" not in content

    def test_header_and_exclude_prefix(self, runner, schema_file, tmp_path):
        out = tmp_path / "gen.py"
        result = runner.invoke(
            main,
            [
                "generate", "-s", str(schema_file), "-o", str(out),
                "--header", "# Generated by gql-graphene",
                "--exclude-prefix", "_",
            ],
        )
        assert result.exit_code == 0, result.output
        content = out.read_text()
        assert content.startswith("# Generated by gql-graphene\n\nfrom graphene import ")
        assert "_Debug" not in content

    def test_plain_header_is_commented(self, runner, schema_file, tmp_path):
        out = tmp_path / "gen.py"
        result = runner.invoke(
            main, ["generate", "-s", str(schema_file), "-o", str(out), "--header", "Generated file"]
        )
        assert result.exit_code == 0, result.output
        content = out.read_text()
        assert content.startswith("# Generated file\n\nfrom graphene import ")
        compile(content, str(out), "exec")

    def test_verbose(self, runner, schema_file, tmp_path):
        out = tmp_path / "gen.py"
        result = runner.invoke(main, ["generate", "-s", str(schema_file), "-o", str(out), "-v"])
        assert result.exit_code == 0, result.output
        assert "Definitions: 3" in result.output
        assert "Classes: 3" in result.output

    def test_verbose_counts_filtered_module(self, runner, schema_file, tmp_path):
        out = tmp_path / "gen.py"
        result = runner.invoke(
            main,
            ["generate", "-s", str(schema_file), "-o", str(out), "-v", "--exclude-prefix", "_"],
        )
        assert result.exit_code == 0, result.output
        assert "Definitions: 3" in result.output
        assert "Classes: 2" in result.output
        assert "Imports: Schema, ObjectType, String, Boolean" in result.output

    def test_syntax_error_writes_nothing(self, runner, tmp_path):
        schema = tmp_path / "broken.graphql"
        schema.write_text("type Query {")
        out = tmp_path / "gen.py"
        result = runner.invoke(main, ["generate", "-s", str(schema), "-o", str(out)])
        assert result.exit_code == 1
        assert not out.exists()

    def test_scalar_args_only_failure(self, runner, tmp_path):
        schema = tmp_path / "schema.graphql"
        schema.write_text("type Query { users(filter: UserFilter): [User] }")
        out = tmp_path / "gen.py"
        result = runner.invoke(
            main, ["generate", "-s", str(schema), "-o", str(out), "--scalar-args-only"]
        )
        assert result.exit_code == 1
        assert "UserFilter" in result.output
        assert not out.exists()

    def test_missing_schema(self, runner, tmp_path):
        result = runner.invoke(main, ["generate", "-s", str(tmp_path / "missing.graphql")])
        assert result.exit_code == 2
