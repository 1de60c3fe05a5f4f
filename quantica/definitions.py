"""
Unit definitions: the read-only table every :class:`CompoundUnit` is
resolved against, and the loader that builds it from text.

A definitions table is line oriented::

    # comment
    kilo- = 1e3 = k-                    # prefix
    meter = [length] = m = metre        # base unit
    radian = [] = rad                   # dimensionless base unit
    foot = 0.3048 * meter = ft = feet   # derived unit

The right-hand side of a derived unit is any expression understood by
:func:`quantica.parser.parse_expr_quant`, evaluated against the lines read
so far.
"""
import hashlib
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from quantica.core import CompoundUnit, Quantity, SimpleUnit
from quantica.errors import (
    ParserError,
    PrefixAlreadyDefinedError,
    UndefinedUnitError,
    UnitAlreadyDefinedError,
)
from quantica.utils.logging import Debug

BaseExpansion = Tuple[float, Tuple[SimpleUnit, ...]]


@dataclass(frozen=True, eq=False, repr=False)
class Definitions:
    """Prefixes, unit expansions and dimension labels of one definitions table.

    Two tables are considered the same iff their :attr:`def_string_hash`
    match; structural equality is never computed.

    :param bases: Unit symbol to ``(multiplier, base units)``.
    :param synonyms: Any accepted unit name to its canonical symbol.
    :param units_list: Every accepted unit name.
    :param prefixes: Every accepted prefix name.
    :param prefix_values: Canonical prefix to multiplier, ``""`` maps to 1.
    :param prefix_synonyms: Any accepted prefix name to its canonical name.
    :param unit_types: Base unit symbol to dimension label.
    :param def_string_hash: SHA-256 digest of the source text.
    """

    bases: Mapping[str, BaseExpansion]
    synonyms: Mapping[str, str]
    units_list: Tuple[str, ...]
    prefixes: Tuple[str, ...]
    prefix_values: Mapping[str, float]
    prefix_synonyms: Mapping[str, str]
    unit_types: Mapping[str, str]
    def_string_hash: str

    def resolve(self, name: str) -> SimpleUnit:
        """Resolves a written unit name, such as ``km`` or ``feet``, to a
        canonical :class:`SimpleUnit` with power 1.

        :raises UndefinedUnitError: If the name matches no unit.
        """
        for candidate in (name, name[:-1] if name.endswith("s") else None):
            if not candidate:
                continue
            unit = self._resolve_exact(candidate)
            if unit is not None:
                return unit
        raise UndefinedUnitError(name)

    def _resolve_exact(self, name: str):
        if name in self.synonyms:
            return SimpleUnit(self.synonyms[name], "", 1)
        for prefix in sorted(self.prefixes, key=len, reverse=True):
            rest = name[len(prefix) :]
            if name.startswith(prefix) and rest in self.synonyms:
                return SimpleUnit(self.synonyms[rest], self.prefix_synonyms[prefix], 1)
        return None

    def unit(self, name: str) -> CompoundUnit:
        return CompoundUnit(self, (self.resolve(name),))

    def quantity(self, magnitude, name: str) -> Quantity:
        return Quantity(magnitude, self.unit(name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Definitions):
            return NotImplemented
        return self.def_string_hash == other.def_string_hash

    def __hash__(self) -> int:
        return hash(self.def_string_hash)

    def __repr__(self) -> str:
        return (
            f"Definitions(units={len(self.bases)}, "
            f"prefixes={len(self.prefix_values) - 1}, hash={self.def_string_hash[:12]})"
        )


def def_string_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class _DefinitionsLoader:
    """Accumulates definition lines into mutable tables. :attr:`definitions`
    is a live view used to evaluate right-hand sides while loading."""

    def __init__(self) -> None:
        self.bases: Dict[str, BaseExpansion] = {}
        self.synonyms: Dict[str, str] = {}
        self.units_list: List[str] = []
        self.prefixes: List[str] = []
        self.prefix_values: Dict[str, float] = {"": 1.0}
        self.prefix_synonyms: Dict[str, str] = {"": ""}
        self.unit_types: Dict[str, str] = {}
        self.definitions = Definitions(
            bases=self.bases,
            synonyms=self.synonyms,
            units_list=self.units_list,
            prefixes=self.prefixes,
            prefix_values=self.prefix_values,
            prefix_synonyms=self.prefix_synonyms,
            unit_types=self.unit_types,
            def_string_hash="",
        )

    def read_line(self, line: str) -> None:
        parts = [part.strip() for part in line.split("=")]
        if len(parts) < 2 or not all(parts):
            raise ParserError(f"Malformed definition: {line}")
        name, value, aliases = parts[0], parts[1], parts[2:]
        if name.endswith("-"):
            self.add_prefix(name, value, aliases)
        elif value.startswith("[") and value.endswith("]"):
            self.add_base(name, value[1:-1].strip(), aliases)
        else:
            self.add_derived(name, value, aliases)

    def add_prefix(self, name: str, value: str, aliases: List[str]) -> None:
        names = [p.rstrip("-") for p in [name] + aliases]
        for prefix in names:
            if prefix in self.prefix_synonyms:
                raise PrefixAlreadyDefinedError(prefix)
        factor = self.evaluate(value)
        if not factor.is_dimensionless():
            raise ParserError(f"Prefix {names[0]} must be dimensionless, got {value}")
        self.prefix_values[names[0]] = float(factor.magnitude)
        for prefix in names:
            self.prefix_synonyms[prefix] = names[0]
            self.prefixes.append(prefix)

    def add_base(self, name: str, dimension: str, aliases: List[str]) -> None:
        self.register_names(name, aliases)
        if dimension:
            self.bases[name] = (1.0, (SimpleUnit(name, "", 1),))
            self.unit_types[name] = dimension
        else:
            self.bases[name] = (1.0, ())

    def add_derived(self, name: str, value: str, aliases: List[str]) -> None:
        from quantica.convert import convert_base

        base = convert_base(self.evaluate(value))
        self.register_names(name, aliases)
        self.bases[name] = (float(base.magnitude), base.units.units)

    def register_names(self, name: str, aliases: List[str]) -> None:
        for symbol in [name] + aliases:
            if symbol in self.synonyms:
                raise UnitAlreadyDefinedError(symbol)
        for symbol in [name] + aliases:
            self.synonyms[symbol] = name
            self.units_list.append(symbol)

    def evaluate(self, expression: str) -> Quantity:
        from quantica.parser import parse_expr_quant

        return parse_expr_quant(self.definitions, expression)

    def freeze(self, text: str) -> Definitions:
        return Definitions(
            bases=MappingProxyType(dict(self.bases)),
            synonyms=MappingProxyType(dict(self.synonyms)),
            units_list=tuple(self.units_list),
            prefixes=tuple(self.prefixes),
            prefix_values=MappingProxyType(dict(self.prefix_values)),
            prefix_synonyms=MappingProxyType(dict(self.prefix_synonyms)),
            unit_types=MappingProxyType(dict(self.unit_types)),
            def_string_hash=def_string_hash(text),
        )


def read_definitions(text: str) -> Definitions:
    """Builds a :class:`Definitions` table from definitions text.

    :param text: The definitions source.
    :type text: str
    :return: The loaded, read-only table.
    :rtype: Definitions
    :raises UnitAlreadyDefinedError: If a unit name or alias repeats.
    :raises PrefixAlreadyDefinedError: If a prefix name or alias repeats.
    :raises UndefinedUnitError: If a right-hand side uses an unknown unit.
    :raises ParserError: If a line cannot be parsed.
    """
    loader = _DefinitionsLoader()
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            loader.read_line(line)
    definitions = loader.freeze(text)
    Debug(
        f"Loaded {len(loader.bases)} units and {len(loader.prefix_values) - 1} "
        f"prefixes ({definitions.def_string_hash[:12]})"
    )
    return definitions
