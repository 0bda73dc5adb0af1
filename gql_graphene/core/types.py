"""Resolution of GraphQL type references into graphene constructor expressions."""

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from .context import GenerationContext
from .errors import MalformedTypeError

BUILTIN_SCALARS = frozenset({"String", "Float", "Int", "Boolean", "ID"})


def resolve_type(type_node: TypeNode, context: GenerationContext) -> str:
    """Resolve a type reference to a bare nested expression.

    ``[Item!]!`` becomes ``NonNull(List(NonNull(Item)))``. Built-in scalars
    and wrappers are registered with the context; user-defined type names
    are returned as-is.
    """
    if isinstance(type_node, NonNullTypeNode):
        context.add_import("NonNull")
        return f"NonNull({resolve_type(type_node.type, context)})"
    if isinstance(type_node, ListTypeNode):
        context.add_import("List")
        return f"List({resolve_type(type_node.type, context)})"
    if isinstance(type_node, NamedTypeNode):
        name = type_node.name.value
        if name in BUILTIN_SCALARS:
            context.add_import(name)
        return name
    raise MalformedTypeError(type_node)


def declare_type(
    type_node: TypeNode,
    extra_args: str,
    context: GenerationContext,
    container: str,
) -> str:
    """Render the declaration for a field or argument of the given type.

    Args:
        type_node: The field's or argument's type reference
        extra_args: Keyword arguments to pass along (may be empty)
        context: Run context receiving symbol registrations
        container: Wrapper for user-defined named types
                   ("Field", "InputField" or "Argument")
    """
    suffix = f", {extra_args}" if extra_args else ""
    if isinstance(type_node, NonNullTypeNode):
        context.add_import("NonNull")
        return f"NonNull({resolve_type(type_node.type, context)}{suffix})"
    if isinstance(type_node, ListTypeNode):
        context.add_import("List")
        return f"List({resolve_type(type_node.type, context)}{suffix})"
    if isinstance(type_node, NamedTypeNode):
        name = type_node.name.value
        if name in BUILTIN_SCALARS:
            context.add_import(name)
            return f"{name}({extra_args})"
        context.add_import(container)
        return f"{container}({name}{suffix})"
    raise MalformedTypeError(type_node)


def named_type(type_node: TypeNode) -> str:
    """Return the innermost type name of a type reference."""
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        type_node = type_node.type
    if not isinstance(type_node, NamedTypeNode):
        raise MalformedTypeError(type_node)
    return type_node.name.value
