"""Core modules for graphene code generation."""

from .config import GeneratorConfig
from .context import GenerationContext
from .dispatcher import DefinitionDispatcher
from .emitter import emit_field
from .errors import (
    CodegenError,
    InvalidOutputError,
    MalformedTypeError,
    UnsupportedArgumentTypeError,
)
from .generator import GrapheneGenerator, generate_python_str
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    Attribute,
    ClassDeclaration,
    GenerationResult,
    ModuleDocument,
    SchemaWiring,
)
from .parser import SchemaParser, parse_schema
from .types import BUILTIN_SCALARS, declare_type, resolve_type

__all__ = [
    # Config
    "GeneratorConfig",
    "GenerationContext",
    # Errors
    "CodegenError",
    "InvalidOutputError",
    "MalformedTypeError",
    "UnsupportedArgumentTypeError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # IR types
    "Attribute",
    "ClassDeclaration",
    "GenerationResult",
    "ModuleDocument",
    "SchemaWiring",
    # Parser
    "SchemaParser",
    "parse_schema",
    # Resolution
    "BUILTIN_SCALARS",
    "declare_type",
    "resolve_type",
    "emit_field",
    "DefinitionDispatcher",
    # Generator
    "GrapheneGenerator",
    "generate_python_str",
]
