"""
Unit conversion, dimensionality and reduction to base units.

Every function here is pure: it reads the :class:`Definitions` referenced by
its arguments and never mutates it, so one table can be shared freely
between threads.
"""
from collections import defaultdict
from functools import reduce
from typing import Callable, Iterable, List

from quantica.core import (
    CompoundUnit,
    Quantity,
    SimpleUnit,
    cast_like,
    multiply_quants,
)
from quantica.definitions import Definitions
from quantica.errors import DifferentDefinitionsError, DimensionalityError
from quantica.utils.logging import Debug

# Net powers are rounded before comparison so that e.g. three 1/3 powers sum to 1
POWER_DIGITS = 12


def simple_to_base(definitions: Definitions, unit: SimpleUnit) -> Quantity:
    """Expands one unit term into base units.

    The magnitude is ``(multiplier * prefix) ** power`` and every base term
    has its power multiplied by ``power``.

    :param definitions: The table ``unit`` was resolved against.
    :type definitions: Definitions
    :param unit: The term to expand.
    :type unit: SimpleUnit
    :return: A float quantity expressed in base units.
    :rtype: Quantity
    """
    multiplier, base_units = definitions.bases[unit.symbol]
    magnitude = (multiplier * definitions.prefix_values[unit.prefix]) ** unit.power
    units = tuple(base ** unit.power for base in base_units)
    return Quantity(magnitude, CompoundUnit(definitions, units))


def to_base(definitions: Definitions, units: Iterable[SimpleUnit]) -> Quantity:
    """Reduces a list of unit terms to a float quantity in base units.

    Terms are folded together by multiplication starting from a dimensionless
    1, so the base terms are concatenated in order without merging.
    """
    unity = Quantity(1.0, CompoundUnit(definitions, ()))
    return reduce(
        multiply_quants,
        (simple_to_base(definitions, unit) for unit in units),
        unity,
    )


def dimensionality_of(
    definitions: Definitions, units: Iterable[SimpleUnit]
) -> List[SimpleUnit]:
    """Computes the canonical dimensionality signature of a list of unit terms.

    Base terms are labelled with their dimension (``[length]``), merged by
    label with powers summed, stripped of zero powers and sorted. Terms that
    are already labels pass through, so a signature maps to itself.
    """
    net = defaultdict(float)
    named = []
    for unit in units:
        if _is_dimension_label(unit.symbol):
            net[unit.symbol] += unit.power
        else:
            named.append(unit)
    for unit in to_base(definitions, named).units:
        net["[" + definitions.unit_types[unit.symbol] + "]"] += unit.power
    return sorted(
        SimpleUnit(label, "", round(power, POWER_DIGITS))
        for label, power in net.items()
        if round(power, POWER_DIGITS) != 0
    )


def dimensionality(quantity: Quantity) -> CompoundUnit:
    """Computes the dimensionality of a quantity.

    :param quantity: The quantity to inspect.
    :type quantity: Quantity
    :return: A unit whose terms are dimension labels, e.g. ``[length] [mass] / [time] ** 2``.
    :rtype: CompoundUnit
    """
    d = quantity.definitions
    return CompoundUnit(d, tuple(dimensionality_of(d, quantity.units)))


def convert_base(quantity: Quantity) -> Quantity:
    """Re-expresses a quantity in base units.

    :param quantity: The quantity to convert.
    :type quantity: Quantity
    :return: The same amount in base units.
    :rtype: Quantity
    """
    base = to_base(quantity.definitions, quantity.units)
    magnitude = quantity.magnitude * cast_like(base.magnitude, quantity.magnitude)
    return Quantity(magnitude, base.units)


def convert(quantity: Quantity, target: CompoundUnit) -> Quantity:
    """Converts a quantity to the given units.

    :param quantity: The quantity to convert.
    :type quantity: Quantity
    :param target: The units to convert to.
    :type target: CompoundUnit
    :return: The same amount expressed in ``target``.
    :rtype: Quantity
    :raises DifferentDefinitionsError: If ``target`` comes from another table.
    :raises DimensionalityError: If the dimensions of both units differ.
    """
    if not quantity.units.same_definitions(target):
        Debug(f"Rejected conversion of {quantity} to {target}: different definitions")
        raise DifferentDefinitionsError(quantity.units, target)

    d = target.definitions
    dim_q = dimensionality_of(d, quantity.units)
    dim_target = dimensionality_of(d, target)
    if dim_q != dim_target:
        Debug(f"Rejected conversion of {quantity} to {target}: dimensionality mismatch")
        raise DimensionalityError(CompoundUnit(d, dim_q), CompoundUnit(d, dim_target))

    base = convert_base(quantity).magnitude
    factor = to_base(d, target).magnitude
    return Quantity(base / cast_like(factor, base), target)


def add_quants(x: Quantity, y: Quantity) -> Quantity:
    """Adds two quantities. ``y`` is converted to the units of ``x``, which
    are the units of the result."""
    return _linear_quants(lambda a, b: a + b, x, y)


def subtract_quants(x: Quantity, y: Quantity) -> Quantity:
    """Subtracts ``y`` from ``x``. ``y`` is converted to the units of ``x``,
    which are the units of the result."""
    return _linear_quants(lambda a, b: a - b, x, y)


def _is_dimension_label(symbol: str) -> bool:
    return symbol.startswith("[") and symbol.endswith("]")


def _linear_quants(op: Callable, x: Quantity, y: Quantity) -> Quantity:
    converted = convert(y, x.units)
    return Quantity(op(x.magnitude, converted.magnitude), x.units)
