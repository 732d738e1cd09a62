"""Tests for button layout and hit-testing."""
import itertools

import pytest

import config
from calculator import EQUALS, Symbol
from layout import Rect, build_layout, hit_test, layout_bounds


def _by_label(layout, label):
    return next(b for b in layout if b.label == label)


def test_basic_layout_grid():
    layout = build_layout(config.BASIC_BUTTONS)
    assert len(layout) == len(config.BASIC_BUTTONS) + 1
    assert _by_label(layout, "C").rect == Rect(20, 120, 60, 60)
    assert _by_label(layout, "÷").rect == Rect(20 + 3 * 67, 120, 60, 60)
    assert _by_label(layout, "7").rect == Rect(20, 187, 60, 60)
    assert _by_label(layout, "7").identity == Symbol.digit("7")


def test_equals_spans_last_row():
    layout = build_layout(config.BASIC_BUTTONS)
    equals = layout[-1]
    assert equals.identity == EQUALS
    assert equals.rect == Rect(20, 120 + 5 * 67, 4 * 60 + 3 * 7, 60)


def test_equals_is_moved_to_the_end():
    layout = build_layout(["1", "=", "2"])
    assert [b.label for b in layout] == ["1", "2", "="]


def test_rows_wrap_at_column_count():
    layout = build_layout(["1", "2", "3"], origin=(0, 0), button_size=(10, 10),
                          padding=5, columns=2)
    assert _by_label(layout, "3").rect == Rect(0, 15, 10, 10)
    assert layout[-1].rect == Rect(0, 30, 25, 10)


def test_buttons_never_overlap():
    layout = build_layout(config.SCIENTIFIC_BUTTONS)
    for a, b in itertools.combinations(layout, 2):
        ra, rb = a.rect, b.rect
        overlap = (ra.x < rb.right and rb.x < ra.right
                   and ra.y < rb.bottom and rb.y < ra.bottom)
        assert not overlap, (a.label, b.label)


def test_hit_test():
    layout = build_layout(config.BASIC_BUTTONS)
    assert hit_test((50, 150), layout).label == "C"
    assert hit_test((20, 120), layout).label == "C"
    assert hit_test((87, 150), layout).label == "⌫"
    assert hit_test((200, 500), layout).label == "="


def test_hit_test_misses():
    layout = build_layout(config.BASIC_BUTTONS)
    assert hit_test((5, 5), layout) is None
    # right edge is exclusive and falls in the padding gap
    assert hit_test((80, 150), layout) is None


def test_shared_edge_belongs_to_one_button():
    layout = build_layout(["1", "2"], origin=(0, 0), button_size=(60, 60), padding=0)
    first, second = layout[0], layout[1]
    assert not first.rect.contains(60, 30)
    assert second.rect.contains(60, 30)
    assert hit_test((60, 30), layout) is second


def test_layout_bounds():
    layout = build_layout(config.BASIC_BUTTONS)
    assert layout_bounds(layout) == (20 + 4 * 60 + 3 * 7, 120 + 5 * 67 + 60)


def test_operator_buttons():
    layout = build_layout(config.BASIC_BUTTONS)
    assert _by_label(layout, "+").is_operator
    assert _by_label(layout, "%").is_operator
    assert not _by_label(layout, "7").is_operator


def test_unknown_label_is_rejected():
    with pytest.raises(ValueError):
        build_layout(["7", "?"])
