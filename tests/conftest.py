import pytest

from quantica.definitions import read_definitions

SCENARIO_DEFS = """
kilo- = 1e3 = k-
centi- = 1e-2 = c-
meter = [length] = m
second = [time] = s
gram = [mass] = g
radian = [] = rad
foot = 0.3048 * meter = ft
inch = foot / 12 = in
minute = 60 * second = min
hour = 60 * minute = h
newton = kilogram * meter / second ** 2 = N
joule = newton * meter = J
"""


@pytest.fixture(scope="session")
def defs():
    return read_definitions(SCENARIO_DEFS)


@pytest.fixture(scope="session")
def other_defs():
    return read_definitions(SCENARIO_DEFS + "\nyard = 3 * foot = yd\n")


@pytest.fixture(scope="session")
def scenario_text():
    return SCENARIO_DEFS
