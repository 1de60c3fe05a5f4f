"""
Common constructors used to build quantities from strings.
"""
from functools import lru_cache

from quantica.config import get_config
from quantica.core import CompoundUnit, Quantity
from quantica.default_units import DEFAULT_DEF_STRING
from quantica.definitions import Definitions, read_definitions
from quantica.parser import parse_expr_quant
from quantica.utils.logging import Info


@lru_cache(maxsize=None)
def default_definitions() -> Definitions:
    """Returns the process-wide default definitions, loading them on first use.

    The built-in table is used unless the configuration names a
    ``definitions_path``. Call :meth:`default_definitions.cache_clear` (or
    :func:`quantica.config.set_config`) to force a reload.

    :return: The shared, read-only definitions.
    :rtype: Definitions
    """
    path = get_config().definitions_path
    if path:
        with open(path, encoding="utf-8") as f:
            text = f.read()
        Info(f"Loading unit definitions from {path}")
    else:
        text = DEFAULT_DEF_STRING
    return read_definitions(text)


def from_string(text: str) -> Quantity:
    """Creates a quantity by parsing a string against the default definitions.
    Handles arithmetic expressions and ``=>`` conversions.

    >>> str(from_string("25 m/s"))
    '25.0 meter / second'
    >>> str(from_string("2 ft + 6 in => ft"))
    '2.5 foot'

    :param text: The expression to evaluate.
    :type text: str
    :return: The resulting quantity.
    :rtype: Quantity
    """
    return parse_expr_quant(default_definitions(), text)


def from_string_with(definitions: Definitions, text: str) -> Quantity:
    """Creates a quantity by parsing a string against custom definitions."""
    return parse_expr_quant(definitions, text)


def units_from_string(text: str) -> CompoundUnit:
    """Parses units from a string. Equivalent to ``from_string(text).units``."""
    return from_string(text).units
