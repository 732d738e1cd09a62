"""Tests for the event/render contract used by the window."""
import pytest

import config
from calculator import BACKSPACE, CLEAR, EQUALS, PERCENT, Symbol
from evaluator import Operator
from input_adapter import (ButtonAnimator, CalculatorSession, KeyPress,
                           PointerDown, PointerMove, Quit, key_to_symbol)
from layout import build_layout


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    layout = build_layout(config.BASIC_BUTTONS)
    return CalculatorSession(layout, animator=ButtonAnimator(clock=clock))


def click(session, label):
    button = next(b for b in session.layout if b.label == label)
    r = button.rect
    return session.handle(PointerDown(r.x + r.w // 2, r.y + r.h // 2))


def view_for(model, label):
    return next(v for v in model.buttons if v.spec.label == label)


# --- Keyboard mapping ---

@pytest.mark.parametrize("char, keysym, expected", [
    ("5", "5", Symbol.digit("5")),
    ("7", "KP_7", Symbol.digit("7")),
    ("\r", "Return", EQUALS),
    ("", "KP_Enter", EQUALS),
    ("=", "equal", EQUALS),
    ("\x1b", "Escape", CLEAR),
    ("c", "c", CLEAR),
    ("\x08", "BackSpace", BACKSPACE),
    ("%", "percent", PERCENT),
    ("*", "asterisk", Symbol.operator(Operator.MUL)),
    ("", "KP_Divide", Symbol.operator(Operator.DIV)),
    ("^", "asciicircum", Symbol.operator(Operator.POW)),
])
def test_key_to_symbol(char, keysym, expected):
    assert key_to_symbol(char, keysym) == expected


def test_unmapped_keys():
    assert key_to_symbol("x", "x") is None
    assert key_to_symbol("", "Shift_L") is None


# --- Press animation ---

def test_animator_fades_out(clock):
    animator = ButtonAnimator(duration_ms=100, clock=clock)
    assert animator.alpha() == 0
    assert not animator.is_animating()

    animator.trigger("button")
    assert animator.alpha() == 255
    clock.now = 0.05
    assert animator.alpha() == 127
    assert animator.is_animating()
    clock.now = 0.2
    assert animator.alpha() == 0
    assert not animator.is_animating()


# --- Session ---

def test_clicks_drive_the_calculator(session):
    for label in ("2", "+", "3", "+", "4"):
        click(session, label)
    model = click(session, "=")
    assert model.display == "9"
    assert model.expression == ""
    assert model.history == ("5 + 4 = 9",)


def test_pending_expression_is_rendered(session):
    click(session, "1")
    click(session, "2")
    model = click(session, "+")
    assert model.display == "12"
    assert model.expression == "12 +"


def test_click_pulses_pressed_button(session, clock):
    model = click(session, "7")
    assert model.display == "7"
    seven = view_for(model, "7")
    assert seven.pressed and seven.pulse_alpha == 255
    assert not view_for(model, "8").pressed
    assert model.animating

    clock.now = 1.0
    model = session.render()
    assert not view_for(model, "7").pressed
    assert not model.animating


def test_click_in_gap_changes_nothing(session):
    model = session.handle(PointerDown(5, 5))
    assert model.display == "0"
    assert not model.animating


def test_pointer_move_sets_hover(session):
    button = next(b for b in session.layout if b.label == "8")
    model = session.handle(PointerMove(button.rect.x + 1, button.rect.y + 1))
    hovered = [v.spec.label for v in model.buttons if v.hovered]
    assert hovered == ["8"]
    model = session.handle(PointerMove(0, 0))
    assert not any(v.hovered for v in model.buttons)


def test_key_press_uses_matching_button(session):
    model = session.handle(KeyPress(Symbol.digit("4")))
    assert model.display == "4"
    assert view_for(model, "4").pressed


def test_key_press_without_button(session):
    # √ is not on the basic layout but the keyboard can still reach symbols
    model = session.handle(KeyPress(Symbol.operator(Operator.POW)))
    assert model.expression == "0 ^"
    assert not model.animating


def test_memory_indicator(session):
    click(session, "5")
    model = click(session, "M+")
    assert model.memory_indicator
    model = click(session, "MR")
    assert model.display == "5"


def test_clear_history_keeps_current_calculation(session):
    for label in ("2", "+", "3", "=", "×"):
        click(session, label)
    model = session.clear_history()
    assert model.history == ()
    assert len(session.calculator.history) == 0
    assert model.expression == "5 ×"


def test_quit(session):
    assert session.handle(Quit()) is None
    assert not session.running


def test_unknown_event(session):
    with pytest.raises(TypeError):
        session.handle("click")
