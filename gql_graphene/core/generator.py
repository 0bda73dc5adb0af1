"""Code generator for graphene modules.

Builds a ModuleDocument from a parsed schema and renders it with a Jinja2
template to produce Python source.

Supports a custom template via the template_dir parameter:
    generator = GrapheneGenerator(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from pathlib import Path
from typing import Optional

from graphql import DocumentNode
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from .config import GeneratorConfig
from .context import GenerationContext
from .dispatcher import DefinitionDispatcher
from .errors import InvalidOutputError
from .hooks import HookRunner
from .ir import GenerationResult, ModuleDocument, SchemaWiring
from .naming import safe_docstring, tuple_literal
from .parser import parse_schema

MODULE_TEMPLATE = "module.py.j2"


class GrapheneGenerator:
    """Generates a graphene module from a GraphQL schema.

    Available templates to override:
        - module.py.j2: the whole generated module

    Example:
        generator = GrapheneGenerator(
            config=GeneratorConfig(schema_wiring=False),
            template_dir="./my_templates",
        )
        code = generator.generate(schema_text)
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        template_dir: Optional[str] = None,
        hooks: Optional[HookRunner] = None,
    ):
        """Initialize the generator.

        Args:
            config: Generation options; defaults to GeneratorConfig()
            template_dir: Optional directory with a custom module.py.j2.
                          Templates here override the built-in template.
            hooks: Optional pre/post generation hooks
        """
        self.config = config or GeneratorConfig()
        self.template_dir = template_dir
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_graphene", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["safe_docstring"] = safe_docstring
        self.env.filters["tuple_literal"] = tuple_literal

    def generate(self, schema_str: str, filename: Optional[str] = None) -> str:
        """Generate module source from SDL text.

        Blank input yields an empty string without invoking the parser.
        """
        if not schema_str.strip():
            return ""
        return self.generate_document(parse_schema(schema_str), filename)

    def generate_document(self, document: DocumentNode, filename: Optional[str] = None) -> str:
        """Generate module source from an already parsed schema."""
        return self.generate_result(document, filename).content

    def generate_result(
        self, document: DocumentNode, filename: Optional[str] = None
    ) -> GenerationResult:
        """Generate module source and keep the document it was rendered from.

        Post hooks run on the rendered text; the final text is compiled so
        that duplicate keywords and hook output are checked as well.
        """
        document = self.hooks.run_pre_hooks(document)
        module = self.build_document(document)
        if not module.classes:
            return GenerationResult(module=module, content="")

        filename = filename or self.config.output_file
        content = self.hooks.run_post_hooks(filename, self.render(module))
        try:
            compile(content, filename, "exec")
        except SyntaxError as e:
            raise InvalidOutputError(f"Generated invalid Python: {e}") from e
        return GenerationResult(module=module, content=content)

    def build_document(self, document: DocumentNode) -> ModuleDocument:
        """Walk all definitions and collect class declarations and imports."""
        context = GenerationContext()
        if self.config.schema_wiring:
            context.add_import("Schema")

        dispatcher = DefinitionDispatcher(context, self.config)
        classes = []
        for definition in document.definitions:
            declaration = dispatcher.dispatch(definition)
            if declaration is not None:
                classes.append(declaration)

        schema = None
        if self.config.schema_wiring:
            schema = SchemaWiring(
                query=context.query_type_name,
                mutation=context.mutation_type_name,
                subscription=context.subscription_type_name,
            )

        return ModuleDocument(
            framework=self.config.framework_module,
            imports=context.symbols,
            classes=classes,
            schema=schema,
        )

    def render(self, module: ModuleDocument) -> str:
        """Render a module document to text."""
        if not module.classes:
            return ""
        template = self.env.get_template(MODULE_TEMPLATE)
        return template.render(document=module)


def generate_python_str(schema_str: str, config: Optional[GeneratorConfig] = None) -> str:
    """Translate SDL text into graphene module source."""
    return GrapheneGenerator(config).generate(schema_str)
