"""Error taxonomy shared by the conversion engine, the definitions loader
and the expression parser.

Every error is a :class:`ValueError` carrying the offending units,
dimensions or symbols so callers can render a precise message.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quantica.core import CompoundUnit, Quantity


class QuantityError(ValueError):
    """Base class for every error raised by quantica."""


class DimensionalityError(QuantityError):
    """Raised when two units have incompatible dimensions.

    :param units_a: Dimensionality signature of the first operand.
    :type units_a: CompoundUnit
    :param units_b: Dimensionality signature of the second operand.
    :type units_b: CompoundUnit
    """

    def __init__(self, units_a: "CompoundUnit", units_b: "CompoundUnit") -> None:
        self.units_a = units_a
        self.units_b = units_b
        super().__init__(f"Dimensionality mismatch: {units_a} and {units_b}")


class DifferentDefinitionsError(QuantityError):
    """Raised when two operands were built from different definition tables.

    :param units_a: Units of the first operand.
    :type units_a: CompoundUnit
    :param units_b: Units of the second operand.
    :type units_b: CompoundUnit
    """

    def __init__(self, units_a: "CompoundUnit", units_b: "CompoundUnit") -> None:
        self.units_a = units_a
        self.units_b = units_b
        super().__init__(f"Different definitions used for {units_a} and {units_b}")


class UndefinedUnitError(QuantityError):
    """Raised when a unit name cannot be resolved against the definitions."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Undefined unit {symbol}")


class ScalingFactorError(QuantityError):
    """Raised when a conversion target carries its own magnitude, e.g. ``m => 3 ft``."""

    def __init__(self, quantity: "Quantity") -> None:
        self.quantity = quantity
        super().__init__(f"Unexpected scaling factor {quantity}")


class UnitAlreadyDefinedError(QuantityError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unit already defined: {symbol}")


class PrefixAlreadyDefinedError(QuantityError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Prefix already defined: {prefix}")


class ParserError(QuantityError):
    """Raised for malformed expressions and definition lines."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Parse error: {message}")
