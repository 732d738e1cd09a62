"""
Calculator Engine for DarkCalc
Input state machine for a single-pending-operation calculator
"""
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import config
from evaluator import (CalculationError, Operator, ScientificFn,
                       apply_function, evaluate)
from formatter import ParseFailure, format_number, parse_number, parse_or_zero
from history_manager import HistoryLog
from memory_manager import MemoryRegister

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    DIGIT = "digit"
    DOT = "dot"
    OPERATOR = "operator"
    CLEAR = "clear"
    EQUALS = "equals"
    BACKSPACE = "backspace"
    PERCENT = "percent"
    SCIENTIFIC = "scientific"
    MEMORY = "memory"


class MemoryOp(Enum):
    CLEAR = "MC"
    RECALL = "MR"
    STORE = "MS"
    ADD = "M+"
    SUBTRACT = "M-"


@dataclass(frozen=True)
class Symbol:
    """One discrete calculator input.

    ``value`` carries the digit character, Operator, ScientificFn or
    MemoryOp for the kinds that need one and is None otherwise.
    """
    kind: SymbolKind
    value: object = None

    @classmethod
    def digit(cls, d):
        d = str(d)
        if len(d) != 1 or d not in "0123456789":
            raise ValueError(f"not a digit: {d!r}")
        return cls(SymbolKind.DIGIT, d)

    @classmethod
    def operator(cls, op: Operator):
        return cls(SymbolKind.OPERATOR, op)

    @classmethod
    def function(cls, fn: ScientificFn):
        return cls(SymbolKind.SCIENTIFIC, fn)

    @classmethod
    def memory(cls, op: MemoryOp):
        return cls(SymbolKind.MEMORY, op)


DOT = Symbol(SymbolKind.DOT)
CLEAR = Symbol(SymbolKind.CLEAR)
EQUALS = Symbol(SymbolKind.EQUALS)
BACKSPACE = Symbol(SymbolKind.BACKSPACE)
PERCENT = Symbol(SymbolKind.PERCENT)


# Button labels as they appear in config.BASIC_BUTTONS / SCIENTIFIC_BUTTONS
LABEL_SYMBOLS = {
    **{d: Symbol.digit(d) for d in "0123456789"},
    ".": DOT,
    "+": Symbol.operator(Operator.ADD),
    "−": Symbol.operator(Operator.SUB),
    "×": Symbol.operator(Operator.MUL),
    "÷": Symbol.operator(Operator.DIV),
    "xʸ": Symbol.operator(Operator.POW),
    "C": CLEAR,
    "=": EQUALS,
    "⌫": BACKSPACE,
    "%": PERCENT,
    "√": Symbol.function(ScientificFn.SQRT),
    "x²": Symbol.function(ScientificFn.SQUARE),
    "1/x": Symbol.function(ScientificFn.INVERSE),
    "sin": Symbol.function(ScientificFn.SIN),
    "cos": Symbol.function(ScientificFn.COS),
    "tan": Symbol.function(ScientificFn.TAN),
    "log": Symbol.function(ScientificFn.LOG),
    "ln": Symbol.function(ScientificFn.LN),
    "MC": Symbol.memory(MemoryOp.CLEAR),
    "MR": Symbol.memory(MemoryOp.RECALL),
    "MS": Symbol.memory(MemoryOp.STORE),
    "M+": Symbol.memory(MemoryOp.ADD),
    "M-": Symbol.memory(MemoryOp.SUBTRACT),
}


def symbol_for_label(label):
    """Map a button label to its Symbol"""
    try:
        return LABEL_SYMBOLS[label]
    except KeyError:
        raise ValueError(f"unknown button label: {label!r}") from None


@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    accumulator: float = 0.0
    pending_operator: Optional[Operator] = None
    awaiting_new_entry: bool = True

    @property
    def is_error(self):
        return self.display == config.ERROR_TEXT

    def expression(self):
        """Pending part of the calculation, e.g. "12 +", for the display"""
        if self.pending_operator is None:
            return ""
        return f"{format_number(self.accumulator)} {self.pending_operator.label}"


INITIAL_STATE = CalculatorState()
ERROR_STATE = CalculatorState(display=config.ERROR_TEXT)


def _enter_digit(state, digit):
    if state.awaiting_new_entry:
        return replace(state, display=digit, awaiting_new_entry=False)
    if state.display == "0":
        return replace(state, display=digit)
    display = state.display + digit
    try:
        parse_number(display)
    except ParseFailure:
        # Past the float range; the display must stay a finite number
        return state
    return replace(state, display=display)


def _enter_dot(state):
    if state.awaiting_new_entry:
        return replace(state, display="0.", awaiting_new_entry=False)
    if "." in state.display or "e" in state.display:
        return state
    return replace(state, display=state.display + ".")


def _backspace(state):
    if state.is_error:
        return replace(state, display="0")
    remainder = state.display[:-1]
    try:
        parse_number(remainder)
    except ParseFailure:
        # "" or a dangling "-" / "1e+"
        remainder = "0"
    # What is left is now being edited, so further digits append to it
    return replace(state, display=remainder, awaiting_new_entry=False)


def _resolve(state, history=None):
    """Evaluate the pending operation. Raises CalculationError."""
    operand = parse_or_zero(state.display)
    result = evaluate(state.accumulator, operand, state.pending_operator)
    text = format_number(result)
    if history is not None:
        expression = "{} {} {}".format(format_number(state.accumulator),
                                       state.pending_operator.label,
                                       format_number(operand))
        history.record(expression, text)
    return result, text


def _press_operator(state, op):
    # Chained operations fold left to right: "2 + 3 ×" shows 5
    if state.pending_operator is not None:
        result, text = _resolve(state)
        return CalculatorState(display=text, accumulator=result,
                               pending_operator=op, awaiting_new_entry=True)
    return replace(state, accumulator=parse_or_zero(state.display),
                   pending_operator=op, awaiting_new_entry=True)


def _press_equals(state, history):
    if state.pending_operator is None:
        return state
    result, text = _resolve(state, history)
    return CalculatorState(display=text, accumulator=result,
                           pending_operator=None, awaiting_new_entry=True)


def _press_percent(state):
    value = parse_or_zero(state.display) / 100
    return replace(state, display=format_number(value), awaiting_new_entry=True)


def _press_function(state, fn):
    value = apply_function(fn, parse_or_zero(state.display))
    return replace(state, display=format_number(value), awaiting_new_entry=True)


def apply_symbol(state: CalculatorState, symbol: Symbol,
                 history: Optional[HistoryLog] = None) -> CalculatorState:
    """Return the state that follows ``state`` after one input symbol.

    Successful equals are recorded into ``history`` when one is given.
    Arithmetic failures never escape: they yield the error state.
    Memory symbols need a register and are handled by Calculator.
    """
    kind = symbol.kind
    try:
        if kind is SymbolKind.DIGIT:
            return _enter_digit(state, symbol.value)
        if kind is SymbolKind.DOT:
            return _enter_dot(state)
        if kind is SymbolKind.OPERATOR:
            return _press_operator(state, symbol.value)
        if kind is SymbolKind.CLEAR:
            return INITIAL_STATE
        if kind is SymbolKind.EQUALS:
            return _press_equals(state, history)
        if kind is SymbolKind.BACKSPACE:
            return _backspace(state)
        if kind is SymbolKind.PERCENT:
            return _press_percent(state)
        if kind is SymbolKind.SCIENTIFIC:
            return _press_function(state, symbol.value)
    except CalculationError as exc:
        logger.debug("Calculation failed, showing error: %s", exc)
        return ERROR_STATE
    raise ValueError(f"symbol not handled by the state machine: {symbol!r}")


class Calculator:
    """Calculator state plus the history log and memory register"""

    def __init__(self, history=None, memory=None):
        self.state = INITIAL_STATE
        self.history = history if history is not None else HistoryLog()
        self.memory = memory if memory is not None else MemoryRegister()

    def press(self, symbol):
        """Apply one input symbol and return the new state"""
        if symbol.kind is SymbolKind.MEMORY:
            self.state = self._apply_memory(symbol.value)
        else:
            self.state = apply_symbol(self.state, symbol, self.history)
        logger.debug("%s -> %s", symbol, self.state)
        return self.state

    def press_label(self, label):
        return self.press(symbol_for_label(label))

    def _apply_memory(self, op):
        state = self.state
        if op is MemoryOp.CLEAR:
            self.memory.clear()
            return state
        if op is MemoryOp.RECALL:
            value = self.memory.recall()
            if not math.isfinite(value):
                return ERROR_STATE
            return replace(state, display=format_number(value),
                           awaiting_new_entry=True)

        value = parse_or_zero(state.display)
        if op is MemoryOp.STORE:
            self.memory.store(value)
        elif op is MemoryOp.ADD:
            self.memory.add(value)
        elif op is MemoryOp.SUBTRACT:
            self.memory.subtract(value)
        return replace(state, awaiting_new_entry=True)

    def paste(self, text):
        """Replace the current entry with pasted text if it is a number.

        Returns True when the paste was accepted.
        """
        try:
            value = parse_number(text.strip())
        except ParseFailure:
            logger.warning("Ignoring pasted text that is not a number: %r", text[:40])
            return False
        self.state = replace(self.state, display=format_number(value),
                             awaiting_new_entry=True)
        return True

    def clear(self):
        """Clear current calculation"""
        self.state = INITIAL_STATE
        return self.state

    def get_display(self):
        return self.state.display

    def get_expression(self):
        return self.state.expression()
