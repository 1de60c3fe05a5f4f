import logging

from quantica import (
    DimensionalityError,
    convert,
    convert_base,
    dimensionality,
    from_string,
    units_from_string,
)
from quantica.utils.logging import Debug

logging.basicConfig(level=logging.DEBUG)

Debug(f"Meter in feet: {convert(from_string('m'), units_from_string('ft'))}")
Debug(f"Newton in base units: {convert_base(from_string('newton'))}")
Debug(f"Newton dimensionality: {dimensionality(from_string('newton'))}")
Debug(f"Sum: {from_string('2 ft + 6 in => ft')}")

speed = from_string("25 m/s") + from_string("3 mph")
Debug(f"Speed: {speed} ({speed.to('km/h')})")

try:
    from_string("1 m => s")
except DimensionalityError as e:
    Debug(f"Rejected: {e}")
