from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Number
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

import numpy as np

from quantica.errors import DifferentDefinitionsError

if TYPE_CHECKING:
    from quantica.definitions import Definitions


@dataclass(frozen=True, order=True)
class SimpleUnit:
    """One unit term: a symbol, an optional prefix and a power.

    Ordering compares ``(symbol, prefix, power)``, which is what dimensionality
    signatures are sorted by.

    :param symbol: Canonical unit name, a key of :attr:`Definitions.bases`.
    :type symbol: str
    :param prefix: Canonical prefix name, ``""`` for none.
    :type prefix: str
    :param power: Exponent of the term. May be negative or fractional.
    :type power: float
    """

    symbol: str
    prefix: str = ""
    power: float = 1

    def __pow__(self, power: float) -> "SimpleUnit":
        return SimpleUnit(self.symbol, self.prefix, self.power * power)

    def __str__(self) -> str:
        name = f"{self.prefix}{self.symbol}"
        if self.power == 1:
            return name
        return f"{name} ** {_format_power(self.power)}"


@dataclass(frozen=True)
class CompoundUnit:
    """An ordered product of :class:`SimpleUnit` terms resolved against one
    :class:`Definitions` table. An empty product is dimensionless.

    :param definitions: The table the terms were resolved against.
    :type definitions: Definitions
    :param units: The terms, in the order they were written.
    :type units: Tuple[SimpleUnit, ...]
    """

    definitions: "Definitions"
    units: Tuple[SimpleUnit, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(self.units))

    def is_dimensionless(self) -> bool:
        return len(self.units) == 0

    def same_definitions(self, other: "CompoundUnit") -> bool:
        return self.definitions.def_string_hash == other.definitions.def_string_hash

    def __mul__(self, other: "CompoundUnit") -> "CompoundUnit":
        return CompoundUnit(self.definitions, self.units + other.units)

    def __truediv__(self, other: "CompoundUnit") -> "CompoundUnit":
        return CompoundUnit(self.definitions, self.units + _invert(other.units))

    def __pow__(self, power: float) -> "CompoundUnit":
        return CompoundUnit(self.definitions, tuple(u ** power for u in self.units))

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self):
        return iter(self.units)

    def __str__(self) -> str:
        num = [u for u in self.units if u.power > 0]
        den = [u ** -1 for u in self.units if u.power < 0]
        top = " ".join(str(u) for u in num)
        if not den:
            return top
        bottom = " ".join(str(u) for u in den)
        return f"{top or '1'} / {bottom}"

    def __repr__(self) -> str:
        return f"CompoundUnit({str(self)!r})"


class Quantity:
    """
    A numeric magnitude paired with a :class:`CompoundUnit`.
    Quantities are immutable; every operation returns a new one.

    The magnitude may be any numeric type supporting the four arithmetic
    operations and exponentiation: ``int``, ``float``, ``Fraction``,
    ``Decimal`` or a numpy array.
    """

    __slots__ = ("_magnitude", "_units")

    def __init__(self, magnitude: Any, units: CompoundUnit) -> None:
        self._magnitude = magnitude
        self._units = units

    @property
    def magnitude(self) -> Any:
        return self._magnitude

    @property
    def units(self) -> CompoundUnit:
        return self._units

    @property
    def definitions(self) -> "Definitions":
        return self._units.definitions

    @property
    def dimensionality(self) -> CompoundUnit:
        from quantica.convert import dimensionality

        return dimensionality(self)

    def is_dimensionless(self) -> bool:
        return self._units.is_dimensionless()

    def to(self, target: Union[CompoundUnit, str]) -> "Quantity":
        """Convert this quantity to another unit.

        :param target: Target units, or a unit expression parsed against this
            quantity's definitions.
        :type target: CompoundUnit or str
        :return: The converted quantity.
        :rtype: Quantity
        :raises DimensionalityError: If the dimensions differ.
        :raises DifferentDefinitionsError: If ``target`` uses another table.
        """
        from quantica.convert import convert

        if isinstance(target, str):
            from quantica.parser import parse_units

            target = parse_units(self.definitions, target)
        return convert(self, target)

    def to_base(self) -> "Quantity":
        from quantica.convert import convert_base

        return convert_base(self)

    def is_close(self, other: "Quantity", rel_tol: Optional[float] = None) -> bool:
        """Checks whether ``other``, converted to these units, is numerically
        close to this quantity."""
        from quantica.config import get_config
        from quantica.convert import convert

        if rel_tol is None:
            rel_tol = get_config().rel_tolerance
        converted = convert(other, self._units)
        return bool(
            np.all(
                np.isclose(
                    np.asarray(self._magnitude, dtype=float),
                    np.asarray(converted.magnitude, dtype=float),
                    rtol=rel_tol,
                    atol=0.0,
                )
            )
        )

    # --- Arithmetic Operations ---

    def __add__(self, other: object) -> "Quantity":
        from quantica.convert import add_quants

        if isinstance(other, Quantity):
            return add_quants(self, other)
        return NotImplemented

    def __sub__(self, other: object) -> "Quantity":
        from quantica.convert import subtract_quants

        if isinstance(other, Quantity):
            return subtract_quants(self, other)
        return NotImplemented

    def __mul__(self, other: object) -> "Quantity":
        if isinstance(other, Quantity):
            return multiply_quants(self, other)
        if _is_scalar(other):
            return Quantity(self._magnitude * other, self._units)
        return NotImplemented

    def __rmul__(self, other: object) -> "Quantity":
        if _is_scalar(other):
            return Quantity(other * self._magnitude, self._units)
        return NotImplemented

    def __truediv__(self, other: object) -> "Quantity":
        if isinstance(other, Quantity):
            return divide_quants(self, other)
        if _is_scalar(other):
            return Quantity(self._magnitude / other, self._units)
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Quantity":
        if _is_scalar(other):
            scalar = Quantity(other, CompoundUnit(self.definitions))
            return divide_quants(scalar, self)
        return NotImplemented

    def __pow__(self, power: float) -> "Quantity":
        return expt_quants(self, power)

    def __neg__(self) -> "Quantity":
        return Quantity(-self._magnitude, self._units)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self._units != other._units:
            return False
        if isinstance(self._magnitude, np.ndarray) or isinstance(
            other._magnitude, np.ndarray
        ):
            return np.array_equal(self._magnitude, other._magnitude)
        return self._magnitude == other._magnitude

    def __hash__(self) -> int:
        if isinstance(self._magnitude, np.ndarray):
            return hash((self._magnitude.tobytes(), self._units))
        return hash((self._magnitude, self._units))

    def __str__(self) -> str:
        units = str(self._units)
        if not units:
            return _format_magnitude(self._magnitude)
        return f"{_format_magnitude(self._magnitude)} {units}"

    def __repr__(self) -> str:
        return f"Quantity({_format_magnitude(self._magnitude)}, {str(self._units)!r})"


def multiply_quants(x: Quantity, y: Quantity) -> Quantity:
    """Multiplies two quantities. Unit terms are concatenated, not merged.

    :raises DifferentDefinitionsError: If the operands use different tables.
    """
    _check_definitions(x, y)
    return Quantity(x.magnitude * y.magnitude, x.units * y.units)


def divide_quants(x: Quantity, y: Quantity) -> Quantity:
    """Divides two quantities. The divisor's terms are appended with negated powers.

    :raises DifferentDefinitionsError: If the operands use different tables.
    """
    _check_definitions(x, y)
    return Quantity(x.magnitude / y.magnitude, x.units / y.units)


def expt_quants(x: Quantity, power: float) -> Quantity:
    """Raises a quantity to a real power, multiplying every term's exponent."""
    return Quantity(x.magnitude ** power, x.units ** power)


def cast_like(value: float, like: Any) -> Any:
    """Casts a float conversion factor to the numeric type of ``like`` where
    that type does not mix with floats."""
    if isinstance(like, (Fraction, Decimal)):
        return type(like)(value)
    return value


def _check_definitions(x: Quantity, y: Quantity) -> None:
    if not x.units.same_definitions(y.units):
        raise DifferentDefinitionsError(x.units, y.units)


def _invert(units: Tuple[SimpleUnit, ...]) -> Tuple[SimpleUnit, ...]:
    return tuple(u ** -1 for u in units)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (Number, np.ndarray, np.number))


def _format_power(power: float) -> str:
    if float(power).is_integer():
        return str(int(power))
    return repr(float(power))


def _format_magnitude(magnitude: Any) -> str:
    if isinstance(magnitude, float):
        return repr(magnitude)
    return str(magnitude)
