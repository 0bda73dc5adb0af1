"""Name normalization and Python literal helpers.

All formatting of names and literals in the generated module goes through
this module so the output rules live in one place.
"""

import keyword
import re
from typing import Mapping, Sequence

# A word character directly followed by an upper-case letter
_CASE_BOUNDARY = re.compile(r"(\w)([A-Z])")

PYTHON_KEYWORDS = frozenset(keyword.kwlist)


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case.

    Matches are taken left to right without overlap, so runs of capitals
    are only split pairwise: ``getHTTP`` becomes ``get_ht_tp``.
    """
    return _CASE_BOUNDARY.sub(r"\1_\2", name).lower()


def is_explicit_snake_case(name: str) -> bool:
    """Return True if the schema name already carries underscores."""
    return "_" in name


def safe_identifier(name: str) -> str:
    """Suffix Python keywords with an underscore."""
    if name in PYTHON_KEYWORDS:
        return f"{name}_"
    return name


def string_literal(text: str) -> str:
    """Render text as a single-quoted Python string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f"'{escaped}'"


def tuple_literal(names: Sequence[str]) -> str:
    """Render names as a tuple literal, keeping one-element tuples a tuple."""
    if len(names) == 1:
        return f"({names[0]}, )"
    return f"({', '.join(names)})"


def dict_literal(mapping: Mapping[str, str]) -> str:
    """Render a mapping of name -> expression as a dict literal."""
    pairs = [f"{string_literal(key)}: {value}" for key, value in mapping.items()]
    return "{" + ", ".join(pairs) + "}"


def safe_docstring(text: str) -> str:
    """Escape text for use inside a ''' docstring."""
    if not text:
        return ""
    text = text.replace("\\", "\\\\").replace("'''", "\\'\\'\\'")
    if text.endswith("'"):
        text += " "
    return text


def to_camel_case(name: str) -> str:
    """Camel-case a snake_case attribute the way graphene names fields.

    Empty components (from doubled or trailing underscores) become a
    literal underscore, so ``a__b`` maps to ``a_B``.
    """
    components = name.split("_")
    return components[0] + "".join(part.capitalize() if part else "_" for part in components[1:])
