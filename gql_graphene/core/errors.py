"""Exceptions raised while generating graphene code.

Every error here is fatal for the run: nothing is returned or written
once one of them is raised.
"""

from typing import Any


class CodegenError(Exception):
    """Base class for code generation failures."""


class MalformedTypeError(CodegenError):
    """Raised when a type reference is not NonNull, List or Named."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Expected type node but node was {type(node).__name__}")


class UnsupportedArgumentTypeError(CodegenError):
    """Raised in scalar-only argument mode for a user-defined argument type."""

    def __init__(self, field_name: str, argument_name: str, type_name: str):
        self.field_name = field_name
        self.argument_name = argument_name
        self.type_name = type_name
        super().__init__(
            f"Argument '{argument_name}' of field '{field_name}' has type "
            f"'{type_name}'; only built-in scalar arguments are supported"
        )


class InvalidOutputError(CodegenError):
    """Raised when the rendered module is not valid Python."""
