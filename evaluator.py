"""
Operation Evaluator for DarkCalc
Applies binary operators and scientific functions to floats
"""
import math
from enum import Enum


class CalculationError(Exception):
    """Base class for arithmetic failures shown as the error sentinel"""


class DivideByZero(CalculationError):
    pass


class ArithmeticFault(CalculationError):
    """NaN, infinity or a math domain error"""


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def label(self):
        return _OPERATOR_LABELS[self]


_OPERATOR_LABELS = {
    Operator.ADD: "+",
    Operator.SUB: "−",
    Operator.MUL: "×",
    Operator.DIV: "÷",
    Operator.POW: "^",
}


class ScientificFn(Enum):
    SQRT = "sqrt"
    SQUARE = "square"
    INVERSE = "inverse"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"


def _checked(value):
    if math.isnan(value) or math.isinf(value):
        raise ArithmeticFault(f"non-finite result: {value}")
    return value


def evaluate(a: float, b: float, op: Operator) -> float:
    """Apply a binary operator, raising CalculationError on failure"""
    if op is Operator.ADD:
        return _checked(a + b)
    if op is Operator.SUB:
        return _checked(a - b)
    if op is Operator.MUL:
        return _checked(a * b)
    if op is Operator.DIV:
        if b == 0:
            raise DivideByZero(f"{a} / 0")
        return _checked(a / b)
    if op is Operator.POW:
        try:
            return _checked(math.pow(a, b))
        except (ValueError, OverflowError) as exc:
            raise ArithmeticFault(f"{a} ^ {b}: {exc}") from exc
    raise ValueError(f"unknown operator: {op!r}")


def _inverse(x):
    if x == 0:
        raise DivideByZero("1 / 0")
    return 1.0 / x


_FUNCTIONS = {
    ScientificFn.SQRT: math.sqrt,
    ScientificFn.SQUARE: lambda x: x * x,
    ScientificFn.INVERSE: _inverse,
    ScientificFn.SIN: lambda x: math.sin(math.radians(x)),
    ScientificFn.COS: lambda x: math.cos(math.radians(x)),
    ScientificFn.TAN: lambda x: math.tan(math.radians(x)),
    ScientificFn.LOG: math.log10,
    ScientificFn.LN: math.log,
}


def apply_function(fn: ScientificFn, x: float) -> float:
    """Apply a unary scientific function. Trig functions take degrees."""
    func = _FUNCTIONS[fn]
    try:
        return _checked(func(x))
    except (ValueError, OverflowError) as exc:
        # math raises ValueError for domain errors such as sqrt(-1)
        raise ArithmeticFault(f"{fn.value}({x}): {exc}") from exc
