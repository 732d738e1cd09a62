"""
DarkCalc Calculator
Main application entry point
"""
import argparse
import logging
import sys
import tkinter as tk
from contextlib import contextmanager

import config
from gui import DarkCalcGUI

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="darkcalc", description=config.APP_NAME)
    parser.add_argument("--scientific", action="store_true",
                        help="show the scientific button layout")
    parser.add_argument("--light", action="store_true",
                        help="start with the light palette")
    return parser.parse_args(argv)


def create_window():
    """Create the Tk root window, or None if no display is available"""
    try:
        return tk.Tk()
    except tk.TclError as exc:
        logger.error("Failed to initialise the window: %s", exc)
        return None


@contextmanager
def window_scope(root):
    """Destroy the root window when the block exits, however it exits"""
    try:
        yield root
    finally:
        root.destroy()
        logger.info("Window closed")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    root = create_window()
    if root is None:
        return 1

    with window_scope(root):
        DarkCalcGUI(root, scientific=args.scientific, dark=not args.light)
        logger.info("%s %s started", config.APP_NAME, config.VERSION)
        root.mainloop()
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
