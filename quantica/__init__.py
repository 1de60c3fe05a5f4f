from quantica.constructors import (
    default_definitions,
    from_string,
    from_string_with,
    units_from_string,
)
from quantica.convert import (
    add_quants,
    convert,
    convert_base,
    dimensionality,
    subtract_quants,
)
from quantica.core import (
    CompoundUnit,
    Quantity,
    SimpleUnit,
    divide_quants,
    expt_quants,
    multiply_quants,
)
from quantica.definitions import Definitions, read_definitions
from quantica.errors import (
    DifferentDefinitionsError,
    DimensionalityError,
    ParserError,
    PrefixAlreadyDefinedError,
    QuantityError,
    ScalingFactorError,
    UndefinedUnitError,
    UnitAlreadyDefinedError,
)

__version__ = "0.1.0"
