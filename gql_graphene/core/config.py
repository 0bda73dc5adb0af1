"""Generator settings."""

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Options controlling what the generated module contains."""

    # Module named in the generated import line
    framework_module: str = "graphene"

    # Emit `schema = Schema(query=..., mutation=...)` at the end
    schema_wiring: bool = True

    # Carry schema descriptions into docstrings and description= keywords
    descriptions: bool = True

    # Refuse arguments whose type is not a built-in scalar
    scalar_arguments_only: bool = False

    # Default output filename (also passed to post-generate hooks)
    output_file: str = "gen.py"


def description_of(node, config: GeneratorConfig) -> str | None:
    """Return the node's description if descriptions are propagated."""
    if not config.descriptions or not node.description:
        return None
    return node.description.value or None
