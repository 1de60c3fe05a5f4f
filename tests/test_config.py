import logging

import pytest
from pytest import approx

from quantica import UndefinedUnitError, from_string
from quantica.config import QuanticaConfig, get_config, set_config
from quantica.constructors import default_definitions
from quantica.utils.logging import GetLogger


@pytest.fixture
def restore_config():
    yield
    set_config(QuanticaConfig())


def test_defaults(monkeypatch):
    for name in ("QUANTICA_DEFINITIONS", "QUANTICA_LOG_LEVEL", "QUANTICA_REL_TOLERANCE"):
        monkeypatch.delenv(name, raising=False)
    config = QuanticaConfig.from_env()
    assert config.definitions_path is None
    assert config.log_level is None
    assert config.rel_tolerance == 1e-9


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("QUANTICA_DEFINITIONS", str(tmp_path / "units.txt"))
    monkeypatch.setenv("QUANTICA_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUANTICA_REL_TOLERANCE", "1e-3")
    config = QuanticaConfig.from_env()
    assert config.definitions_path == str(tmp_path / "units.txt")
    assert config.log_level == "DEBUG"
    assert config.rel_tolerance == 1e-3


def test_definitions_path(tmp_path, restore_config):
    path = tmp_path / "units.txt"
    path.write_text("meter = [length] = m\nfoot = 0.3048 * meter = ft\n", encoding="utf-8")
    set_config(QuanticaConfig(definitions_path=str(path)))

    assert get_config().definitions_path == str(path)
    assert from_string("1 ft => m").magnitude == approx(0.3048)
    with pytest.raises(UndefinedUnitError):
        from_string("s")


def test_set_config_reloads_definitions(tmp_path, restore_config):
    before = default_definitions()
    path = tmp_path / "units.txt"
    path.write_text("second = [time] = s\n", encoding="utf-8")
    set_config(QuanticaConfig(definitions_path=str(path)))
    assert default_definitions() != before


def test_log_level(restore_config):
    set_config(QuanticaConfig(log_level="DEBUG"))
    assert GetLogger().level == logging.DEBUG


def test_rel_tolerance(restore_config):
    set_config(QuanticaConfig(rel_tolerance=1e-2))
    assert from_string("1.005 m").is_close(from_string("1 m"))
    set_config(QuanticaConfig(rel_tolerance=1e-6))
    assert not from_string("1.005 m").is_close(from_string("1 m"))
