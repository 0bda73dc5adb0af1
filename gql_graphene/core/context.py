"""Run-scoped state shared by the generation steps."""

from dataclasses import dataclass, field


@dataclass
class GenerationContext:
    """Collects graphene symbols and root operation type names for one run.

    A new context is created for every generated document and handed to
    each step explicitly. Symbols are only ever added; the import line
    lists them in the order they were first registered.
    """

    # dict used as an insertion-ordered set
    imports: dict[str, None] = field(default_factory=dict)
    query_type_name: str = "Query"
    mutation_type_name: str | None = None
    subscription_type_name: str | None = None

    def add_import(self, symbol: str):
        """Register a graphene symbol the generated module needs."""
        self.imports.setdefault(symbol, None)

    @property
    def symbols(self) -> list[str]:
        """Registered symbols in first-registration order."""
        return list(self.imports)
