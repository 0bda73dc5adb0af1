"""Intermediate Representation (IR) of a generated graphene module.

The generation steps build these records; the module template turns them
into text. Literal formatting (docstrings, tuples) is applied at render time.
"""

from dataclasses import dataclass, field


@dataclass
class Attribute:
    """A class-level assignment, e.g. a field or an enum member."""
    name: str
    value: str


@dataclass
class ClassDeclaration:
    """One generated class, produced per schema type definition."""
    name: str
    base: str
    description: str | None = None
    # Meta attribute name -> referenced type names, e.g. {"interfaces": ["Node"]}
    meta: dict[str, list[str]] = field(default_factory=dict)
    attributes: list[Attribute] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True if the body needs a `pass` statement."""
        return not self.meta and not self.attributes


@dataclass
class SchemaWiring:
    """Root operation types for the trailing `Schema(...)` statement."""
    query: str
    mutation: str | None = None
    subscription: str | None = None


@dataclass
class ModuleDocument:
    """The complete generated module before serialization."""
    framework: str = "graphene"
    imports: list[str] = field(default_factory=list)
    classes: list[ClassDeclaration] = field(default_factory=list)
    schema: SchemaWiring | None = None


@dataclass
class GenerationResult:
    """A built module document together with its final text."""
    module: ModuleDocument
    content: str
