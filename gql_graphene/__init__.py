"""Generate graphene class declarations from GraphQL SDL."""

from .core import GeneratorConfig, GrapheneGenerator, generate_python_str

__all__ = ["GeneratorConfig", "GrapheneGenerator", "generate_python_str"]
