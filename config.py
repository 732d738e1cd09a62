"""
DarkCalc Configuration Settings
"""
import logging

# Application Settings
APP_NAME = "DarkCalc Calculator"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 300
WINDOW_HEIGHT = 520
HISTORY_SIDEBAR_WIDTH = 200
DISPLAY_FONT = ("Consolas", 28, "bold")
EXPRESSION_FONT = ("Consolas", 12)
BUTTON_FONT = ("Segoe UI", 16)
LABEL_FONT = ("Segoe UI", 11)

# Display box geometry (x, y, width, height)
DISPLAY_BOX = (20, 20, 260, 80)

# ── Palettes ─────────────────────────────────────────────────────────────────

# DARK palette  – black theme with a blue press pulse
THEME_DARK = {
    "bg":           "#141414",
    "display_bg":   "#282828",
    "display_fg":   "#FFFFFF",
    "expr_fg":      "#969696",
    "btn_bg":       "#282828",
    "btn_hover":    "#3A3A3A",
    "btn_fg":       "#FFFFFF",
    "operator_fg":  "#FF9F0A",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "pulse":        "#6496FF",
    "sidebar_bg":   "#0F0F0F",
    "history_fg":   "#C8C8C8",
    "result_fg":    "#64C864",
    "title_fg":     "#969696",
    "memory_fg":    "#FF9F0A",
}

# LIGHT palette
THEME_LIGHT = {
    "bg":           "#DDE6ED",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",
    "expr_fg":      "#6E8090",
    "btn_bg":       "#DDE6ED",
    "btn_hover":    "#C8D4DF",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "pulse":        "#2C5F8A",
    "sidebar_bg":   "#C8D4DF",
    "history_fg":   "#1A2332",
    "result_fg":    "#1E7A56",
    "title_fg":     "#6E8090",
    "memory_fg":    "#B07D1E",
}


def get_theme(dark: bool) -> dict:
    """Return the active colour palette."""
    return THEME_DARK if dark else THEME_LIGHT


# ── Button layout ────────────────────────────────────────────────────────────

LAYOUT_ORIGIN = (20, 120)
BUTTON_SIZE = (60, 60)
BUTTON_PADDING = 7
GRID_COLUMNS = 4

# Row-major labels, wrapped every GRID_COLUMNS buttons. "=" is always
# appended last on its own full-width row by layout.build_layout.
BASIC_BUTTONS = [
    "C",  "⌫", "%", "÷",
    "7",  "8", "9", "×",
    "4",  "5", "6", "−",
    "1",  "2", "3", "+",
    "M+", "0", ".", "MR",
]

SCIENTIFIC_BUTTONS = [
    "√",   "x²",  "1/x", "xʸ",
    "sin", "cos", "tan", "log",
    "ln",  "MC",  "MS",  "M-",
] + BASIC_BUTTONS

# ── Calculator behaviour ─────────────────────────────────────────────────────

ERROR_TEXT = "Error"

# History Settings
MAX_HISTORY_ITEMS = 10

# Values closer than this to an integer are shown without a fraction
FORMAT_EPSILON = 1e-9
FORMAT_SIGNIFICANT_DIGITS = 10

# Button press feedback
PRESS_ANIMATION_MS = 100
ANIMATION_FRAME_MS = 16

# Graph settings
GRAPH_FIGSIZE = (4.5, 3.0)
GRAPH_DPI = 90

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
