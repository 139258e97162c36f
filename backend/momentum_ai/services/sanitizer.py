"""Markdown clean-up applied to generated answers before they are returned.

Rules run in order and each is applied across the whole text. None of them
consumes a line break, so the number of lines only changes when the final
trim removes leading or trailing blank lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SanitizeRule:
    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


SANITIZE_RULES: tuple[SanitizeRule, ...] = (
    SanitizeRule("bold", re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    SanitizeRule("italic", re.compile(r"\*(.*?)\*"), r"\1"),
    SanitizeRule("bullet", re.compile(r"^[^\S\r\n]*\*[^\S\r\n]+", re.MULTILINE), "• "),
)

_RULES_BY_NAME = {rule.name: rule for rule in SANITIZE_RULES}


def apply_rule(name: str, text: str) -> str:
    return _RULES_BY_NAME[name].apply(text)


def sanitize(raw_text: str) -> str:
    text = raw_text
    for rule in SANITIZE_RULES:
        text = rule.apply(text)
    return text.strip()
