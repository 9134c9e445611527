"""Hand-written parser for highlight.js theme stylesheets.

Only dot-class rules with flat declaration lists are understood:
    .hljs{color:#333;background:#f3f3f3}
    .hljs-comment,.hljs-quote{color:#998;font-style:italic}

Anything else (element selectors, at-rules, pseudo classes) is skipped.
"""

from __future__ import annotations

import re

from hilite.stylesheet.model import StyleRule

__all__ = ["parse_stylesheet", "merge_rules"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: .a, .b .c { properties }
_RULE_RE = re.compile(
    r"""
    (?P<selectors>
        \.[a-zA-Z0-9_-]*                # first class
        (?:\s*(?:,\s*)?\.[a-zA-Z0-9_-]*)* # more classes: comma, space or compound
    )
    \s*\{                               # opening brace
    (?P<body>[^{}]*)                    # property declarations
    \}                                  # closing brace
    """,
    re.VERBOSE,
)

_CLASS_NAME_RE = re.compile(r"\.([a-zA-Z0-9_-]+)")


def _parse_classes(raw: str) -> tuple[str, ...]:
    """Split a selector list into bare class names."""
    return tuple(_CLASS_NAME_RE.findall(raw))


def _parse_properties(body: str) -> dict[str, str]:
    """Parse the body of a rule block into a property dictionary."""
    props: dict[str, str] = {}
    for declaration in body.split(";"):
        key, sep, value = declaration.partition(":")
        key = key.strip().lower()
        value = value.strip()
        if sep and key and value:
            props[key] = value
    return props


def parse_stylesheet(source: str) -> list[StyleRule]:
    """Parse theme CSS into rules, in source order.

    Rules without any declarations are dropped.
    """
    source = _COMMENT_RE.sub(" ", source)
    rules: list[StyleRule] = []
    for match in _RULE_RE.finditer(source):
        classes = _parse_classes(match.group("selectors"))
        properties = _parse_properties(match.group("body"))
        if classes and properties:
            rules.append(StyleRule(classes=classes, properties=properties))
    return rules


def merge_rules(rules: list[StyleRule]) -> dict[str, dict[str, str]]:
    """Fold rules into one property map per class name.

    Each class gets its own copy of the declarations; a later rule
    overwrites same-named properties of an earlier one.
    """
    merged: dict[str, dict[str, str]] = {}
    for rule in rules:
        for name in rule.classes:
            merged.setdefault(name, {}).update(rule.properties)
    return merged
