"""Turns top-level schema definitions into class declarations."""

from graphql import (
    DefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    UnionTypeDefinitionNode,
)

from .config import GeneratorConfig, description_of
from .context import GenerationContext
from .emitter import emit_fields
from .ir import Attribute, ClassDeclaration
from .naming import safe_identifier


class DefinitionDispatcher:
    """Processes definitions one at a time, in document order.

    Schema blocks update the context's root operation names and produce no
    class. Directive definitions and extensions are skipped.
    """

    def __init__(self, context: GenerationContext, config: GeneratorConfig):
        self.context = context
        self.config = config

    def dispatch(self, definition: DefinitionNode) -> ClassDeclaration | None:
        """Process one definition, returning its class declaration if any."""
        if isinstance(definition, SchemaDefinitionNode):
            self._process_schema(definition)
        elif isinstance(definition, ObjectTypeDefinitionNode):
            return self._process_object_type(definition)
        elif isinstance(definition, InputObjectTypeDefinitionNode):
            return self._process_input_type(definition)
        elif isinstance(definition, InterfaceTypeDefinitionNode):
            return self._process_interface(definition)
        elif isinstance(definition, ScalarTypeDefinitionNode):
            return self._process_scalar(definition)
        elif isinstance(definition, EnumTypeDefinitionNode):
            return self._process_enum(definition)
        elif isinstance(definition, UnionTypeDefinitionNode):
            return self._process_union(definition)
        return None

    def _process_schema(self, node: SchemaDefinitionNode):
        for operation_type in node.operation_types:
            type_name = operation_type.type.name.value
            operation = operation_type.operation.value
            if operation == "query":
                self.context.query_type_name = type_name
            elif operation == "mutation":
                self.context.mutation_type_name = type_name
            elif operation == "subscription":
                self.context.subscription_type_name = type_name

    def _process_object_type(self, node: ObjectTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("ObjectType")
        name = node.name.value
        # Root types picked up by name unless a schema block named them
        if name == "Mutation" and self.context.mutation_type_name is None:
            self.context.mutation_type_name = name
        if name == "Subscription" and self.context.subscription_type_name is None:
            self.context.subscription_type_name = name

        meta = {}
        if node.interfaces:
            meta["interfaces"] = [iface.name.value for iface in node.interfaces]
        return ClassDeclaration(
            name=name,
            base="ObjectType",
            description=description_of(node, self.config),
            meta=meta,
            attributes=emit_fields(node.fields, self.context, self.config),
        )

    def _process_input_type(self, node: InputObjectTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("InputObjectType")
        return ClassDeclaration(
            name=node.name.value,
            base="InputObjectType",
            description=description_of(node, self.config),
            attributes=emit_fields(node.fields, self.context, self.config),
        )

    def _process_interface(self, node: InterfaceTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("Interface")
        return ClassDeclaration(
            name=node.name.value,
            base="Interface",
            description=description_of(node, self.config),
            attributes=emit_fields(node.fields, self.context, self.config),
        )

    def _process_scalar(self, node: ScalarTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("Scalar")
        return ClassDeclaration(
            name=node.name.value,
            base="Scalar",
            description=description_of(node, self.config),
        )

    def _process_enum(self, node: EnumTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("Enum")
        # Members are numbered by position; schema values carry no ordinal
        members = [
            Attribute(name=safe_identifier(value.name.value), value=str(index))
            for index, value in enumerate(node.values or ())
        ]
        return ClassDeclaration(
            name=node.name.value,
            base="Enum",
            description=description_of(node, self.config),
            attributes=members,
        )

    def _process_union(self, node: UnionTypeDefinitionNode) -> ClassDeclaration:
        self.context.add_import("Union")
        meta = {}
        if node.types:
            meta["types"] = [member.name.value for member in node.types]
        return ClassDeclaration(
            name=node.name.value,
            base="Union",
            description=description_of(node, self.config),
            meta=meta,
        )
