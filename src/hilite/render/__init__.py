"""Hosts for styled runs: terminal output and JSON."""

from hilite.render.ansi import to_ansi
from hilite.render.serialize import font_to_dict, run_to_dict, styled_to_dict

__all__ = ["to_ansi", "font_to_dict", "run_to_dict", "styled_to_dict"]
