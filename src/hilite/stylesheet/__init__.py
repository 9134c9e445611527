from hilite.stylesheet.parser import merge_rules, parse_stylesheet
from hilite.stylesheet.model import ClassStyle, StyleRule

__all__ = ["parse_stylesheet", "merge_rules", "ClassStyle", "StyleRule"]
