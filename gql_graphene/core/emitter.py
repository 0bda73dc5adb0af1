"""Field declaration emitter."""

from graphql import FieldDefinitionNode, InputValueDefinitionNode

from .arguments import resolve_field_arguments
from .config import GeneratorConfig
from .context import GenerationContext
from .ir import Attribute
from .naming import safe_identifier, to_snake_case
from .types import declare_type


def emit_field(
    field: FieldDefinitionNode | InputValueDefinitionNode,
    context: GenerationContext,
    config: GeneratorConfig,
) -> Attribute:
    """Turn a schema field into a class attribute declaration.

    ``searchItems(filterName: String): [Item]`` becomes
    ``search_items = List(Item, filterName=String())``.
    """
    attribute_name = safe_identifier(to_snake_case(field.name.value))
    # Arguments first, so their symbols precede the field's own wrappers
    extra_args = resolve_field_arguments(field, context, config)
    container = "Field" if isinstance(field, FieldDefinitionNode) else "InputField"
    return Attribute(
        name=attribute_name,
        value=declare_type(field.type, extra_args, context, container),
    )


def emit_fields(field_nodes, context: GenerationContext, config: GeneratorConfig) -> list[Attribute]:
    """Emit declarations for all fields in order."""
    return [emit_field(node, context, config) for node in field_nodes or ()]
