from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import List, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict

# Integer operands 0 to 999 (three-digit cap, inclusive)
MIN_OPERAND = 0
MAX_OPERAND = 999

# OCR commonly reads the multiplication sign as a letter x/X
_GLYPH_MAP = str.maketrans({"×": "*", "x": "*", "X": "*", "÷": "/"})

# Same-line whitespace: anything str.splitlines() would not break on
_SAME_LINE_SPACE = r"[^\S\r\n\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]*"

# ASCII word boundaries around the operands, so 1000 never yields 100 or 000
_EXPRESSION_RE = re.compile(
    r"(?<![0-9A-Za-z_])([0-9]{1,3})"
    + _SAME_LINE_SPACE
    + r"([-+*/])"
    + _SAME_LINE_SPACE
    + r"([0-9]{1,3})(?![0-9A-Za-z_])"
)

_TWO_PLACES = Decimal("0.01")


class Operator(Enum):
    ADD = ("+", "+")
    SUB = ("-", "-")
    MUL = ("*", "×")
    DIV = ("/", "÷")

    def __init__(self, symbol: str, glyph: str) -> None:
        self.symbol = symbol
        self.glyph = glyph

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        return _BY_SYMBOL[symbol]


_BY_SYMBOL = {op.symbol: op for op in Operator}


class MatchedExpression(NamedTuple):
    left: int
    operator: Operator
    right: int


class MathProblem(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


Number = Union[int, float]


# --- Normalize / extract ----------------------------------------------------------


def normalize_text(text: str) -> str:
    """Rewrite OCR operator glyphs (×, x, X, ÷) to * and /. Nothing else changes."""
    return text.translate(_GLYPH_MAP)


def extract_expressions(text: str) -> List[MatchedExpression]:
    """
    Find every `<a> <op> <b>` triple in document order.

    Operands are 1-3 digit runs bounded by word boundaries, so digits embedded
    in longer numbers (e.g. 1000) never match. Matches do not overlap.
    """
    found: List[MatchedExpression] = []
    for m in _EXPRESSION_RE.finditer(normalize_text(text)):
        left, symbol, right = m.groups()
        found.append(MatchedExpression(int(left), Operator.from_symbol(symbol), int(right)))
    return found


# --- Evaluate / format ------------------------------------------------------------


def _in_range(n: int) -> bool:
    return MIN_OPERAND <= n <= MAX_OPERAND


def evaluate(expr: MatchedExpression) -> Optional[Number]:
    """Return the result, or None when the triple should be skipped."""
    left, op, right = expr
    if not (_in_range(left) and _in_range(right)):
        return None

    if op is Operator.ADD:
        return left + right
    if op is Operator.SUB:
        return left - right
    if op is Operator.MUL:
        return left * right
    # Operator.DIV
    if right == 0:
        return None
    return left / right


def _is_integral(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


def format_answer(value: Number) -> str:
    if _is_integral(value):
        return str(int(value))
    # Decimal(float) is exact, so half-up here rounds the true binary value
    fixed = str(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
    if fixed.endswith(".00"):
        return fixed[:-3]
    return fixed


def format_question(expr: MatchedExpression) -> str:
    return f"{expr.left} {expr.operator.glyph} {expr.right}"


def solve(expr: MatchedExpression) -> Optional[MathProblem]:
    value = evaluate(expr)
    if value is None:
        return None
    return MathProblem(question=format_question(expr), answer=format_answer(value))


# --- Public API -------------------------------------------------------------------


def extract_and_solve(text: str) -> List[MathProblem]:
    """
    Extract arithmetic expressions from (possibly noisy) OCR text and solve them.

    Out-of-range operands and division by zero are dropped silently; the
    result is always a fresh list, empty when nothing usable was found.
    """
    problems: List[MathProblem] = []
    for expr in extract_expressions(text):
        p = solve(expr)
        if p is not None:
            problems.append(p)
    return problems
