"""
GUI for DarkCalc
Tkinter canvas that draws the RenderModel and forwards raw events
"""
import logging
import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

import config
from graph_generator import GraphGenerator
from input_adapter import (CalculatorSession, KeyPress, PointerDown,
                           PointerMove, Quit, key_to_symbol)
from layout import build_layout, layout_bounds

logger = logging.getLogger(__name__)

CONTROL_MASK = 0x0004


def _blend(base, overlay, alpha):
    """Mix two #RRGGBB colours; alpha 0..255 is the weight of ``overlay``"""
    t = alpha / 255.0
    b = [int(base[i:i + 2], 16) for i in (1, 3, 5)]
    o = [int(overlay[i:i + 2], 16) for i in (1, 3, 5)]
    mixed = [round(bc + (oc - bc) * t) for bc, oc in zip(b, o)]
    return "#{:02X}{:02X}{:02X}".format(*mixed)


class DarkCalcGUI:
    def __init__(self, root, scientific=False, dark=True):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.resizable(False, False)

        labels = config.SCIENTIFIC_BUTTONS if scientific else config.BASIC_BUTTONS
        self.layout = build_layout(labels)
        self.session = CalculatorSession(self.layout)
        self.graph_generator = GraphGenerator(dark)

        self.dark_mode = dark
        self.T = config.get_theme(dark)
        self.show_history = False
        self._anim_job = None

        self.create_widgets()
        self.bind_events()
        self.redraw(self.session.render())

    # ── Window setup ─────────────────────────────────────────────────────────
    def _grid_size(self):
        right, bottom = layout_bounds(self.layout)
        margin = config.LAYOUT_ORIGIN[0]
        return (max(right + margin, config.WINDOW_WIDTH),
                max(bottom + margin, config.WINDOW_HEIGHT))

    def create_widgets(self):
        self.canvas = tk.Canvas(self.root, bg=self.T["bg"], highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self._resize()

    def _resize(self):
        width, height = self._grid_size()
        if self.show_history:
            width += config.HISTORY_SIDEBAR_WIDTH
        self.root.geometry(f"{width}x{height}")
        self.canvas.config(width=width, height=height)

    def bind_events(self):
        self.canvas.bind("<Button-1>", lambda e: self.dispatch(PointerDown(e.x, e.y)))
        self.canvas.bind("<Motion>", lambda e: self.dispatch(PointerMove(e.x, e.y)))
        self.root.bind("<Key>", self.on_key_press)
        self.root.bind("<Control-c>", lambda e: self.copy_display())
        self.root.bind("<Control-v>", lambda e: self.paste_display())
        self.root.protocol("WM_DELETE_WINDOW", lambda: self.dispatch(Quit()))

    # ── Event handling ───────────────────────────────────────────────────────
    def dispatch(self, event):
        model = self.session.handle(event)
        if model is None:
            self.root.quit()
            return
        self.redraw(model)
        if model.animating:
            self._schedule_animation()

    def on_key_press(self, event):
        """Handle keyboard input"""
        if event.state & CONTROL_MASK:
            return
        if event.char == 'h':
            self.toggle_history()
            return
        if event.char == 'g':
            self.show_history_graph()
            return
        if event.char == 't':
            self.toggle_theme()
            return
        if event.keysym == 'Delete':
            self.redraw(self.session.clear_history())
            return
        symbol = key_to_symbol(event.char, event.keysym)
        if symbol is not None:
            self.dispatch(KeyPress(symbol))

    def _schedule_animation(self):
        if self._anim_job is None:
            self._anim_job = self.root.after(config.ANIMATION_FRAME_MS, self._animate)

    def _animate(self):
        self._anim_job = None
        model = self.session.render()
        self.redraw(model)
        if model.animating:
            self._schedule_animation()

    # ── Clipboard ────────────────────────────────────────────────────────────
    def copy_display(self):
        text = self.session.calculator.get_display()
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        logger.debug("Copied %r to clipboard", text)

    def paste_display(self):
        try:
            text = self.root.clipboard_get()
        except tk.TclError:
            logger.info("Clipboard is empty")
            return
        if self.session.calculator.paste(text):
            self.redraw(self.session.render())

    # ── Views ────────────────────────────────────────────────────────────────
    def toggle_history(self):
        self.show_history = not self.show_history
        self._resize()
        self.redraw(self.session.render())

    def toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self.T = config.get_theme(self.dark_mode)
        self.graph_generator = GraphGenerator(self.dark_mode)
        self.canvas.config(bg=self.T["bg"])
        self.redraw(self.session.render())

    def show_history_graph(self):
        """Open the history chart in its own window"""
        top = tk.Toplevel(self.root)
        top.title("History")
        top.configure(bg=self.T["bg"])
        fig = self.graph_generator.create_history_graph(self.session.calculator.history)
        canvas = FigureCanvasTkAgg(fig, master=top)
        canvas.draw()
        canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        top.bind("<Escape>", lambda e: top.destroy())

    # ── Drawing ──────────────────────────────────────────────────────────────
    def redraw(self, model):
        self.canvas.delete("all")
        self._draw_display(model)
        for view in model.buttons:
            self._draw_button(view)
        if self.show_history:
            self._draw_history(model.history)

    def _draw_display(self, model):
        c, T = self.canvas, self.T
        x, y, w, h = config.DISPLAY_BOX
        c.create_rectangle(x, y, x + w, y + h, fill=T["display_bg"], outline="")
        c.create_text(x + w - 10, y + 8, text=model.expression, anchor=tk.NE,
                      fill=T["expr_fg"], font=config.EXPRESSION_FONT)
        family, size, weight = config.DISPLAY_FONT
        if len(model.display) > 12:
            size = max(12, size * 12 // len(model.display))
        c.create_text(x + w - 10, y + h - 8, text=model.display, anchor=tk.SE,
                      fill=T["display_fg"], font=(family, size, weight))
        if model.memory_indicator:
            c.create_text(x + 8, y + 8, text="M", anchor=tk.NW,
                          fill=T["memory_fg"], font=config.LABEL_FONT)

    def _draw_button(self, view):
        c, T = self.canvas, self.T
        spec = view.spec
        r = spec.rect
        if spec.label == "=":
            fill, fg = T["equals_bg"], T["equals_fg"]
        else:
            fill = T["btn_hover"] if view.hovered else T["btn_bg"]
            fg = T["operator_fg"] if spec.is_operator else T["btn_fg"]
        if view.pulse_alpha:
            fill = _blend(fill, T["pulse"], view.pulse_alpha)
        c.create_rectangle(r.x, r.y, r.right, r.bottom, fill=fill, outline="")
        c.create_text(r.x + r.w / 2, r.y + r.h / 2, text=spec.label,
                      fill=fg, font=config.BUTTON_FONT)

    def _draw_history(self, lines):
        c, T = self.canvas, self.T
        width, height = self._grid_size()
        x = width
        c.create_rectangle(x, 0, x + config.HISTORY_SIDEBAR_WIDTH, height,
                           fill=T["sidebar_bg"], outline="")
        c.create_text(x + 10, 10, text="History", anchor=tk.NW,
                      fill=T["title_fg"], font=config.LABEL_FONT)
        y = 50
        for line in lines:
            if y > height - 50:
                break
            expression, _, result = line.rpartition(" = ")
            c.create_text(x + 10, y, text=expression, anchor=tk.NW,
                          fill=T["history_fg"], font=config.LABEL_FONT)
            y += 25
            c.create_text(x + 10, y, text="= " + result, anchor=tk.NW,
                          fill=T["result_fg"], font=config.LABEL_FONT)
            y += 35
