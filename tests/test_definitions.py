import logging

import pytest
from pytest import approx

from quantica.core import SimpleUnit
from quantica.definitions import Definitions, def_string_hash, read_definitions
from quantica.errors import (
    ParserError,
    PrefixAlreadyDefinedError,
    UndefinedUnitError,
    UnitAlreadyDefinedError,
)


class TestReadDefinitions:
    def test_base_units(self, defs):
        assert defs.bases["meter"] == (1.0, (SimpleUnit("meter", "", 1),))
        assert defs.unit_types["meter"] == "length"
        assert defs.unit_types["gram"] == "mass"

    def test_dimensionless_base_unit(self, defs):
        assert defs.bases["radian"] == (1.0, ())
        assert "radian" not in defs.unit_types

    def test_derived_units(self, defs):
        multiplier, units = defs.bases["foot"]
        assert multiplier == approx(0.3048)
        assert units == (SimpleUnit("meter", "", 1),)

        multiplier, units = defs.bases["inch"]
        assert multiplier == approx(0.0254)

    def test_derived_from_prefixed_units(self, defs):
        multiplier, units = defs.bases["newton"]
        assert multiplier == approx(1000.0)
        assert [u.symbol for u in units] == ["gram", "meter", "second"]
        assert [u.power for u in units] == [1, 1, -2]

    def test_prefixes(self, defs):
        assert defs.prefix_values["kilo"] == 1000.0
        assert defs.prefix_values[""] == 1.0
        assert defs.prefix_synonyms["k"] == "kilo"
        assert set(defs.prefixes) == {"kilo", "k", "centi", "c"}

    def test_synonyms(self, defs):
        assert defs.synonyms["ft"] == "foot"
        assert defs.synonyms["foot"] == "foot"
        assert "ft" in defs.units_list

    def test_comments_and_blank_lines(self):
        d = read_definitions("# header\n\nmeter = [length] = m  # trailing\n")
        assert list(d.bases) == ["meter"]

    def test_hash_is_fingerprint_of_text(self, defs, scenario_text):
        assert defs.def_string_hash == def_string_hash(scenario_text)
        assert read_definitions(scenario_text) == defs
        assert hash(read_definitions(scenario_text)) == hash(defs)

    def test_different_text_differs(self, defs, other_defs):
        assert defs != other_defs

    def test_tables_are_read_only(self, defs):
        with pytest.raises(TypeError):
            defs.bases["parsec"] = (1.0, ())

    def test_repr(self, defs):
        assert repr(defs).startswith("Definitions(units=10, prefixes=2, hash=")

    def test_logs_summary(self, caplog):
        caplog.set_level(logging.DEBUG, logger="quantica")
        read_definitions("meter = [length]")
        assert "Loaded 1 units and 0 prefixes" in caplog.text


class TestDefinitionErrors:
    def test_unit_redefined(self):
        with pytest.raises(UnitAlreadyDefinedError) as err:
            read_definitions("meter = [length]\nmeter = [distance]")
        assert err.value.symbol == "meter"

    def test_alias_redefined(self):
        with pytest.raises(UnitAlreadyDefinedError):
            read_definitions("meter = [length] = m\nminute = [time] = m")

    def test_prefix_redefined(self):
        with pytest.raises(PrefixAlreadyDefinedError) as err:
            read_definitions("kilo- = 1e3 = k-\nkibi- = 1024 = k-")
        assert err.value.prefix == "k"

    def test_undefined_unit_in_expression(self):
        with pytest.raises(UndefinedUnitError) as err:
            read_definitions("foot = 0.3048 * meter")
        assert str(err.value) == "Undefined unit meter"

    def test_malformed_line(self):
        with pytest.raises(ParserError):
            read_definitions("meter")
        with pytest.raises(ParserError):
            read_definitions("meter = ")

    def test_dimensional_prefix(self):
        with pytest.raises(ParserError):
            read_definitions("meter = [length] = m\nodd- = 2 * meter")


class TestResolve:
    def test_exact(self, defs):
        assert defs.resolve("m") == SimpleUnit("meter", "", 1)

    def test_prefixed(self, defs):
        assert defs.resolve("km") == SimpleUnit("meter", "kilo", 1)
        assert defs.resolve("kilometer") == SimpleUnit("meter", "kilo", 1)
        assert defs.resolve("centimeter") == SimpleUnit("meter", "centi", 1)

    def test_exact_beats_prefix(self, defs):
        assert defs.resolve("min") == SimpleUnit("minute", "", 1)

    def test_plural(self, defs):
        assert defs.resolve("meters") == SimpleUnit("meter", "", 1)
        assert defs.resolve("kilograms") == SimpleUnit("gram", "kilo", 1)

    def test_undefined(self, defs):
        with pytest.raises(UndefinedUnitError) as err:
            defs.resolve("parsec")
        assert err.value.symbol == "parsec"

    def test_default_longest_prefix(self):
        from quantica.constructors import default_definitions

        d = default_definitions()
        assert d.resolve("dam") == SimpleUnit("meter", "deca", 1)
        assert d.resolve("ms") == SimpleUnit("second", "milli", 1)
        assert d.resolve("mph") == SimpleUnit("mile_per_hour", "", 1)
        assert d.resolve("Mibit") == SimpleUnit("bit", "mebi", 1)


def test_definitions_type(defs):
    assert isinstance(defs, Definitions)
