"""Tests for schema loading."""

import pytest
from graphql import GraphQLSyntaxError

from gql_graphene.core.parser import SchemaParser, parse_schema


def test_parse_schema():
    document = parse_schema("type Query { hello: String }")
    assert len(document.definitions) == 1


class TestSchemaParser:
    """Tests for SchemaParser."""

    def test_single_file(self, tmp_path):
        schema_file = tmp_path / "schema.txt"
        schema_file.write_text("type Query { hello: String }\nscalar Date\n")
        document = SchemaParser(str(schema_file)).parse_all()
        assert [d.name.value for d in document.definitions] == ["Query", "Date"]

    def test_directory_in_sorted_order(self, tmp_path):
        (tmp_path / "b.graphqls").write_text("type B { x: Int }")
        (tmp_path / "a.graphql").write_text("type A { x: Int }")
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "c.gql").write_text("type C { x: Int }")
        (tmp_path / "notes.txt").write_text("not a schema {")

        document = SchemaParser(str(tmp_path)).parse_all()
        assert [d.name.value for d in document.definitions] == ["A", "B", "C"]

    def test_blank_files_skipped(self, tmp_path):
        (tmp_path / "empty.graphql").write_text("\n")
        (tmp_path / "types.graphql").write_text("scalar Date")
        document = SchemaParser(str(tmp_path)).parse_all()
        assert len(document.definitions) == 1

    def test_empty_directory(self, tmp_path):
        assert SchemaParser(str(tmp_path)).parse_all().definitions == ()

    def test_syntax_error_reports_file(self, tmp_path, capsys):
        (tmp_path / "broken.graphql").write_text("type Query {")
        parser = SchemaParser(str(tmp_path))
        with pytest.raises(GraphQLSyntaxError):
            parser.parse_all()
        assert "Error parsing broken.graphql" in capsys.readouterr().out
        assert parser.current_file == "broken.graphql"
