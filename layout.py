"""
Button layout and hit-testing for DarkCalc
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import config
from calculator import EQUALS, Symbol, SymbolKind, symbol_for_label

EQUALS_LABEL = "="
_OPERATOR_KINDS = (SymbolKind.OPERATOR, SymbolKind.PERCENT, SymbolKind.SCIENTIFIC)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self):
        return self.x + self.w

    @property
    def bottom(self):
        return self.y + self.h

    def contains(self, px, py):
        # Half-open: a shared edge belongs to the button right/below it
        return self.x <= px < self.right and self.y <= py < self.bottom


@dataclass(frozen=True)
class ButtonSpec:
    identity: Symbol
    label: str
    rect: Rect

    @property
    def is_operator(self):
        return self.identity.kind in _OPERATOR_KINDS


def build_layout(labels: Sequence[str],
                 origin: Tuple[int, int] = config.LAYOUT_ORIGIN,
                 button_size: Tuple[int, int] = config.BUTTON_SIZE,
                 padding: int = config.BUTTON_PADDING,
                 columns: int = config.GRID_COLUMNS):
    """Lay out buttons on a grid, wrapping every ``columns`` labels.

    The equals button is always placed last on its own row and spans
    the full grid width, whether or not ``labels`` lists it.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    ox, oy = origin
    bw, bh = button_size
    step_x, step_y = bw + padding, bh + padding

    buttons = []
    regular = [label for label in labels if label != EQUALS_LABEL]
    for index, label in enumerate(regular):
        row, col = divmod(index, columns)
        rect = Rect(ox + col * step_x, oy + row * step_y, bw, bh)
        buttons.append(ButtonSpec(symbol_for_label(label), label, rect))

    rows = -(-len(regular) // columns)
    full_width = columns * bw + (columns - 1) * padding
    equals_rect = Rect(ox, oy + rows * step_y, full_width, bh)
    buttons.append(ButtonSpec(EQUALS, EQUALS_LABEL, equals_rect))
    return tuple(buttons)


def hit_test(point, layout) -> Optional[ButtonSpec]:
    """Return the button under ``point`` or None"""
    px, py = point
    for button in layout:
        if button.rect.contains(px, py):
            return button
    return None


def layout_bounds(layout):
    """Right and bottom edge of the whole grid"""
    return (max(b.rect.right for b in layout), max(b.rect.bottom for b in layout))
