"""Hooks around graphene module generation.

Pre-generation hooks see the parsed schema and may hand back a different
document (for example one without internal types). Post-generation hooks
see the rendered graphene module and may rewrite its text; the generator
checks that the final text still compiles.

Example:
    hooks = HookRunner()
    hooks.add_pre_hook(FilterTypesHook(exclude_prefix="_", exclude_kinds=["scalar"]))
    hooks.add_post_hook(AddHeaderHook("Generated from schema.graphql"))
    code = GrapheneGenerator(hooks=hooks).generate(sdl)
"""

from typing import Iterable, Protocol, runtime_checkable

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeDefinitionNode,
    UnionTypeDefinitionNode,
)

# Short kind names accepted by FilterTypesHook
DEFINITION_KINDS = {
    "object": ObjectTypeDefinitionNode,
    "input": InputObjectTypeDefinitionNode,
    "interface": InterfaceTypeDefinitionNode,
    "scalar": ScalarTypeDefinitionNode,
    "enum": EnumTypeDefinitionNode,
    "union": UnionTypeDefinitionNode,
}


@runtime_checkable
class PreGenerateHook(Protocol):
    """Receives the parsed schema and returns the document to generate from."""

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Receives the rendered module and returns the text to write.

    Args:
        filename: Target file name, e.g. "gen.py"
        content: Generated graphene module source
    """

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Puts a comment header above the generated module.

    Header lines that are not already comments are turned into ``#``
    comments, so ``AddHeaderHook("Generated file")`` yields
    ``# Generated file`` followed by a blank line.
    """

    def __init__(self, header: str):
        self.header = header

    def comment_lines(self) -> list[str]:
        lines = []
        for line in self.header.rstrip("\n").splitlines():
            if line.lstrip().startswith("#"):
                lines.append(line)
            elif line.strip():
                lines.append(f"# {line}")
            else:
                lines.append("#")
        return lines

    def post_generate(self, _filename: str, content: str) -> str:
        lines = self.comment_lines()
        if not lines:
            return content
        return "\n".join(lines) + "\n\n" + content


class FilterTypesHook:
    """Drops type definitions by name or by kind before generation.

    Schema blocks, directive definitions and extensions pass through
    untouched. ``exclude_kinds`` takes keys of DEFINITION_KINDS.
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
        exclude_kinds: Iterable[str] = (),
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix
        unknown = set(exclude_kinds) - DEFINITION_KINDS.keys()
        if unknown:
            raise ValueError(f"Unknown definition kinds: {', '.join(sorted(unknown))}")
        self.excluded_node_types = tuple(DEFINITION_KINDS[kind] for kind in exclude_kinds)

    def keeps(self, definition) -> bool:
        if not isinstance(definition, TypeDefinitionNode):
            return True
        if isinstance(definition, self.excluded_node_types):
            return False
        name = definition.name.value
        excluded = bool(
            (self.exclude_prefix and name.startswith(self.exclude_prefix))
            or (self.exclude_suffix and name.endswith(self.exclude_suffix))
        )
        included = (not self.include_prefix or name.startswith(self.include_prefix)) and (
            not self.include_suffix or name.endswith(self.include_suffix)
        )
        return included and not excluded

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        return DocumentNode(definitions=tuple(d for d in document.definitions if self.keeps(d)))


class HookRunner:
    """Ordered pre- and post-generation hooks for one generator."""

    def __init__(
        self,
        pre_hooks: Iterable[PreGenerateHook] = (),
        post_hooks: Iterable[PostGenerateHook] = (),
    ):
        self.pre_hooks = list(pre_hooks)
        self.post_hooks = list(post_hooks)

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
