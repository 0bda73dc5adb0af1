"""GraphQL schema loading using graphql-core.

Reads one schema file, or every schema file under a directory, and
produces a single DocumentNode.
"""

import os

from graphql import DocumentNode, GraphQLSyntaxError, parse

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def parse_schema(schema_str: str) -> DocumentNode:
    """Parse SDL text. Syntax errors propagate as GraphQLSyntaxError."""
    return parse(schema_str)


class SchemaParser:
    """Parses GraphQL schema files into one document."""

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.current_file = ""

    def parse_all(self) -> DocumentNode:
        """Parse all schema files and return their definitions in file order."""
        definitions = []
        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            with open(file_path) as f:
                content = f.read()
            if not content.strip():
                continue
            try:
                document = parse_schema(content)
            except GraphQLSyntaxError as e:
                print(f"Error parsing {self.current_file}: {e}")
                raise
            definitions.extend(document.definitions)
        return DocumentNode(definitions=tuple(definitions))

    def _collect_schema_files(self) -> list[str]:
        """Collect the schema file, or all schema files under a directory."""
        if os.path.isfile(self.schema_path):
            return [self.schema_path]
        files = []
        for root, _, filenames in os.walk(self.schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        return sorted(files)
