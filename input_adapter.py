"""
Input/render contract between the calculator core and the window
Raw events in, RenderModel out. Fonts, colours and drawing belong to gui.py.
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import config
from calculator import (BACKSPACE, CLEAR, DOT, EQUALS, PERCENT, Calculator,
                        Symbol)
from evaluator import Operator
from layout import ButtonSpec, hit_test

logger = logging.getLogger(__name__)


# ── Events ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PointerDown:
    x: int
    y: int


@dataclass(frozen=True)
class PointerMove:
    x: int
    y: int


@dataclass(frozen=True)
class KeyPress:
    symbol: Symbol


@dataclass(frozen=True)
class Quit:
    pass


InputEvent = Union[PointerDown, PointerMove, KeyPress, Quit]


# ── Keyboard ─────────────────────────────────────────────────────────────────

_KEYSYM_SYMBOLS = {
    "Return": EQUALS,
    "KP_Enter": EQUALS,
    "Escape": CLEAR,
    "BackSpace": BACKSPACE,
    "KP_Add": Symbol.operator(Operator.ADD),
    "KP_Subtract": Symbol.operator(Operator.SUB),
    "KP_Multiply": Symbol.operator(Operator.MUL),
    "KP_Divide": Symbol.operator(Operator.DIV),
    "KP_Decimal": DOT,
    **{f"KP_{d}": Symbol.digit(d) for d in "0123456789"},
}

_CHAR_SYMBOLS = {
    "+": Symbol.operator(Operator.ADD),
    "-": Symbol.operator(Operator.SUB),
    "*": Symbol.operator(Operator.MUL),
    "/": Symbol.operator(Operator.DIV),
    "^": Symbol.operator(Operator.POW),
    ".": DOT,
    "=": EQUALS,
    "\r": EQUALS,
    "%": PERCENT,
    "c": CLEAR,
    "C": CLEAR,
    **{d: Symbol.digit(d) for d in "0123456789"},
}


def key_to_symbol(char, keysym=None) -> Optional[Symbol]:
    """Translate a key press (tk ``event.char`` / ``event.keysym``) to a Symbol"""
    if keysym and keysym in _KEYSYM_SYMBOLS:
        return _KEYSYM_SYMBOLS[keysym]
    return _CHAR_SYMBOLS.get(char)


# ── Press feedback ───────────────────────────────────────────────────────────

class ButtonAnimator:
    """Fading highlight over the last pressed button.

    Purely cosmetic; reads the clock only when asked for the alpha.
    """

    def __init__(self, duration_ms=config.PRESS_ANIMATION_MS, clock=time.monotonic):
        self.duration = duration_ms / 1000.0
        self.clock = clock
        self.button = None
        self.started = None

    def trigger(self, button):
        self.button = button
        self.started = self.clock()

    def alpha(self):
        """255 right after the press, fading linearly to 0"""
        if self.started is None:
            return 0
        elapsed = self.clock() - self.started
        if elapsed > self.duration:
            return 0
        progress = elapsed / self.duration
        return int(255 * (1.0 - progress))

    def is_animating(self):
        return self.started is not None and self.clock() - self.started <= self.duration


# ── Render model ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ButtonView:
    spec: ButtonSpec
    hovered: bool = False
    pressed: bool = False
    pulse_alpha: int = 0


@dataclass(frozen=True)
class RenderModel:
    display: str
    expression: str
    history: Tuple[str, ...]
    memory_indicator: bool
    buttons: Tuple[ButtonView, ...]

    @property
    def animating(self):
        return any(view.pulse_alpha for view in self.buttons)


class CalculatorSession:
    """Feeds InputEvents to a Calculator and produces RenderModels"""

    def __init__(self, layout, calculator=None, animator=None):
        self.layout = tuple(layout)
        self.calculator = calculator if calculator is not None else Calculator()
        self.animator = animator if animator is not None else ButtonAnimator()
        self.hovered = None
        self.running = True

    def handle(self, event: InputEvent) -> Optional[RenderModel]:
        """Apply one event. Returns None once the session has quit."""
        if isinstance(event, Quit):
            logger.info("Quit requested")
            self.running = False
            return None
        if isinstance(event, PointerDown):
            button = hit_test((event.x, event.y), self.layout)
            if button is not None:
                self._press(button.identity, button)
        elif isinstance(event, PointerMove):
            self.hovered = hit_test((event.x, event.y), self.layout)
        elif isinstance(event, KeyPress):
            self._press(event.symbol, self._button_for(event.symbol))
        else:
            raise TypeError(f"unknown input event: {event!r}")
        return self.render()

    def clear_history(self) -> RenderModel:
        """Empty the history log; the calculation in progress is kept"""
        self.calculator.history.clear()
        logger.info("History cleared")
        return self.render()

    def _press(self, symbol, button):
        self.calculator.press(symbol)
        if button is not None:
            self.animator.trigger(button)

    def _button_for(self, symbol):
        for button in self.layout:
            if button.identity == symbol:
                return button
        return None

    def render(self) -> RenderModel:
        calc = self.calculator
        alpha = self.animator.alpha()
        views = []
        for button in self.layout:
            pressed = alpha > 0 and button is self.animator.button
            views.append(ButtonView(button,
                                    hovered=button is self.hovered,
                                    pressed=pressed,
                                    pulse_alpha=alpha if pressed else 0))
        return RenderModel(display=calc.get_display(),
                           expression=calc.get_expression(),
                           history=tuple(calc.history.format_entries()),
                           memory_indicator=calc.memory.has_memory(),
                           buttons=tuple(views))
