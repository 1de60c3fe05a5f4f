"""
Arithmetic expressions over quantities, e.g. ``"2 ft + 6 in => ft"``.

Grammar, loosest binding first::

    conversion := expr ["=>" expr]
    expr       := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary | unary)*     # juxtaposition multiplies
    unary      := ("-" | "+") unary | power
    power      := atom [("**" | "^") unary]
    atom       := NUMBER | NAME | "(" expr ")"
"""
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional

from quantica.convert import (
    add_quants,
    convert,
    convert_base,
    dimensionality_of,
    subtract_quants,
)
from quantica.core import (
    CompoundUnit,
    Quantity,
    divide_quants,
    expt_quants,
    multiply_quants,
)
from quantica.errors import ParserError, ScalingFactorError

if TYPE_CHECKING:
    from quantica.definitions import Definitions


class TokenType(Enum):
    NUMBER = auto()  # 2, 2.5, 1e-3
    NAME = auto()  # m, kilometer, g_0
    CONVERT = auto()  # =>
    POW = auto()  # ** or ^
    OP = auto()  # + - * /
    LPAR = auto()
    RPAR = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    pos: int


_TOKEN_RE = re.compile(
    r"""
    (?P<SPACE>\s+)
    |(?P<CONVERT>=>)
    |(?P<POW>\*\*|\^)
    |(?P<OP>[-+*/])
    |(?P<LPAR>\()
    |(?P<RPAR>\))
    |(?P<NUMBER>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)
    |(?P<NAME>[^\W\d]\w*)
    """,
    re.VERBOSE,
)

_ATOM_START = (TokenType.NUMBER, TokenType.NAME, TokenType.LPAR)


def tokenize(text: str) -> List[Token]:
    """Splits an expression into tokens, dropping whitespace.

    :raises ParserError: On a character no token can start with.
    """
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if not match:
            raise ParserError(f"Unexpected character {text[pos]!r} at {pos} in {text!r}")
        if match.lastgroup != "SPACE":
            tokens.append(Token(TokenType[match.lastgroup], match.group(0), pos))
        pos = match.end()
    return tokens


class ExpressionParser:
    """Recursive-descent evaluator for one expression against one table.

    :param definitions: Table used to resolve unit names.
    :type definitions: Definitions
    :param text: The expression.
    :type text: str
    """

    def __init__(self, definitions: "Definitions", text: str) -> None:
        self.definitions = definitions
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def pop(self, expected: Optional[TokenType] = None) -> Token:
        token = self.peek()
        if token is None:
            raise ParserError(f"Unexpected end of expression {self.text!r}")
        if expected is not None and token.type != expected:
            raise ParserError(
                f"Expected {expected.name} but found {token.value!r} at {token.pos} in {self.text!r}"
            )
        self.index += 1
        return token

    def accept(self, token_type: TokenType, *values: str) -> Optional[Token]:
        token = self.peek()
        if token is not None and token.type == token_type:
            if not values or token.value in values:
                self.index += 1
                return token
        return None

    def parse(self) -> Quantity:
        if not self.tokens:
            raise ParserError("Empty expression")
        result = self.parse_expr()
        if self.accept(TokenType.CONVERT):
            target = self.parse_expr()
            if target.magnitude != 1:
                raise ScalingFactorError(target)
            result = convert(result, target.units)
        token = self.peek()
        if token is not None:
            raise ParserError(f"Unexpected {token.value!r} at {token.pos} in {self.text!r}")
        return result

    def parse_expr(self) -> Quantity:
        q = self.parse_term()
        while True:
            if self.accept(TokenType.OP, "+"):
                q = add_quants(q, self.parse_term())
            elif self.accept(TokenType.OP, "-"):
                q = subtract_quants(q, self.parse_term())
            else:
                return q

    def parse_term(self) -> Quantity:
        q = self.parse_unary()
        while True:
            token = self.peek()
            if self.accept(TokenType.OP, "*"):
                q = multiply_quants(q, self.parse_unary())
            elif self.accept(TokenType.OP, "/"):
                q = divide_quants(q, self.parse_unary())
            elif token is not None and token.type in _ATOM_START:
                q = multiply_quants(q, self.parse_unary())
            else:
                return q

    def parse_unary(self) -> Quantity:
        if self.accept(TokenType.OP, "-"):
            return -self.parse_unary()
        if self.accept(TokenType.OP, "+"):
            return self.parse_unary()
        return self.parse_power()

    def parse_power(self) -> Quantity:
        base = self.parse_atom()
        if not self.accept(TokenType.POW):
            return base
        exponent = self.parse_unary()
        if dimensionality_of(self.definitions, exponent.units):
            raise ParserError(
                f"Used non-dimensionless exponent in ( {base} ) ** ( {exponent} )"
            )
        return expt_quants(base, convert_base(exponent).magnitude)

    def parse_atom(self) -> Quantity:
        token = self.pop()
        if token.type == TokenType.NUMBER:
            return Quantity(float(token.value), CompoundUnit(self.definitions, ()))
        if token.type == TokenType.NAME:
            return Quantity(1.0, self.definitions.unit(token.value))
        if token.type == TokenType.LPAR:
            inner = self.parse_expr()
            self.pop(TokenType.RPAR)
            return inner
        raise ParserError(f"Unexpected {token.value!r} at {token.pos} in {self.text!r}")


def parse_expr_quant(definitions: "Definitions", text: str) -> Quantity:
    """Evaluates an expression to a quantity.

    :param definitions: Table used to resolve unit names.
    :type definitions: Definitions
    :param text: Expression such as ``"25 m/s"`` or ``"min => s"``.
    :type text: str
    :return: The resulting quantity.
    :rtype: Quantity
    :raises UndefinedUnitError: For unknown unit names.
    :raises ScalingFactorError: If a conversion target has a magnitude.
    :raises DimensionalityError: For incompatible sums or conversions.
    :raises ParserError: For malformed expressions.
    """
    return ExpressionParser(definitions, text).parse()


def parse_units(definitions: "Definitions", text: str) -> CompoundUnit:
    """Parses a unit expression. Equivalent to ``parse_expr_quant(...).units``."""
    return parse_expr_quant(definitions, text).units
