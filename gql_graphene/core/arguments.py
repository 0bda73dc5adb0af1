"""Keyword arguments for generated field declarations.

graphene uses ``name`` and ``description`` as keywords of the field
constructor itself. A schema argument sharing one of those names cannot be
passed as a plain keyword next to them, so it is routed through the
``args={...}`` mapping instead. Arguments named after Python keywords, or
after the field constructor's own parameters (``args``, ``resolver``, ...),
take the same route since they cannot be written as extra keywords at all.
"""

from graphql import FieldDefinitionNode, InputValueDefinitionNode

from .config import GeneratorConfig, description_of
from .context import GenerationContext
from .errors import UnsupportedArgumentTypeError
from .naming import (
    PYTHON_KEYWORDS,
    dict_literal,
    is_explicit_snake_case,
    safe_identifier,
    string_literal,
    to_camel_case,
    to_snake_case,
)
from .types import BUILTIN_SCALARS, declare_type, named_type, resolve_type

# Parameters of graphene's Field / Structure constructors other than name and description
FIELD_PARAMETERS = frozenset({
    "args",
    "resolver",
    "source",
    "deprecation_reason",
    "required",
    "default_value",
    "type_",
    "of_type",
})


def needs_explicit_name(name: str) -> bool:
    """Check whether graphene would expose the generated attribute under another name.

    graphene camel-cases attribute names, so ``URL`` -> ``u_rl`` would come
    back as ``uRl``. Names with underscores always keep an explicit name.
    """
    attribute = safe_identifier(to_snake_case(name))
    return is_explicit_snake_case(name) or to_camel_case(attribute) != name


def resolve_field_arguments(
    field: FieldDefinitionNode | InputValueDefinitionNode,
    context: GenerationContext,
    config: GeneratorConfig,
) -> str:
    """Build the comma-separated keyword text for a field declaration."""
    reserved: set[str] = set()
    extra_args: list[str] = []

    field_name = field.name.value
    if needs_explicit_name(field_name):
        extra_args.append(f"name={string_literal(field_name)}")
        reserved.add("name")
    description = description_of(field, config)
    if description is not None:
        extra_args.append(f"description={string_literal(description)}")
        reserved.add("description")

    # Input fields have no arguments
    arguments = getattr(field, "arguments", None)
    if arguments:
        collision_args: dict[str, str] = {}
        for arg in arguments:
            arg_name = arg.name.value
            if config.scalar_arguments_only:
                type_name = named_type(arg.type)
                if type_name not in BUILTIN_SCALARS:
                    raise UnsupportedArgumentTypeError(field_name, arg_name, type_name)

            if is_colliding(arg_name, reserved):
                collision_args[arg_name] = _collision_argument(arg, context, config)
            else:
                extra_args.append(f"{arg_name}={resolve_argument_type(arg, context, config)}")

        if collision_args:
            extra_args.append(f"args={dict_literal(collision_args)}")

    return ", ".join(extra_args)


def is_colliding(arg_name: str, reserved: set[str]) -> bool:
    """True if the argument cannot be passed as a direct keyword."""
    return arg_name in reserved or arg_name in FIELD_PARAMETERS or arg_name in PYTHON_KEYWORDS


def resolve_argument_type(
    arg: InputValueDefinitionNode,
    context: GenerationContext,
    config: GeneratorConfig,
) -> str:
    """Declaration for an argument passed as a direct keyword."""
    extra = ""
    description = description_of(arg, config)
    if description is not None:
        extra = f"description={string_literal(description)}"
    return declare_type(arg.type, extra, context, "Argument")


def _collision_argument(
    arg: InputValueDefinitionNode,
    context: GenerationContext,
    config: GeneratorConfig,
) -> str:
    context.add_import("Argument")
    description = description_of(arg, config)
    suffix = f", description={string_literal(description)}" if description is not None else ""
    return f"Argument({resolve_type(arg.type, context)}{suffix})"
