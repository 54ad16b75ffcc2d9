"""Call-site detection over plain source text.

Finds the call expression whose argument list encloses a caret offset.
The scanner understands enough of C-family lexical structure to ignore
parentheses inside string literals, char literals, and comments, and to
tell a call apart from a method declaration or an annotation.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from pydantic import BaseModel

# Parenthesised constructs that look like calls but are not.
NON_CALL_KEYWORDS = frozenset(
    {
        "if",
        "for",
        "while",
        "switch",
        "catch",
        "synchronized",
        "return",
        "throw",
        "assert",
        "try",
        "do",
        "else",
        "case",
        "new",
    }
)

# Keywords that may directly precede a call expression.
EXPRESSION_KEYWORDS = frozenset({"return", "throw", "else", "case", "do", "yield", "assert"})

# Characters of source searched backwards from an open parenthesis.
_LOOKBEHIND = 512

_CALLEE_RE = re.compile(
    r"(?<![\w$.])"
    r"(?:(?P<new>\bnew)\s+)?"
    r"(?:(?P<qualifier>[A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)\s*\.\s*)?"
    r"(?P<name>[A-Za-z_$][\w$]*)"
    r"(?P<type_args>\s*<[\w$\s,.?<>\[\]&]*>)?\s*$"
)
_TRAILING_WORD_RE = re.compile(r"[A-Za-z_$][\w$]*$")
_DECLARATION_TAIL_RE = re.compile(r"\s*(?:\{|throws\b|default\b)")


class CallSite(BaseModel):
    """The call expression found around a caret."""

    model_config = {"frozen": True}

    name: str
    qualifier: str | None = None
    open_paren: int
    is_constructor: bool = False

    @property
    def qualified_name(self) -> str:
        if self.qualifier:
            return f"{self.qualifier}.{self.name}"
        return self.name


def _code_parens(text: str, start: int, end: int) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, char)`` for each parenthesis outside literals and comments."""
    i = start
    while i < end:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if ch == "/" and nxt == "/":
            newline = text.find("\n", i)
            i = len(text) if newline == -1 else newline + 1
            continue
        if ch == "/" and nxt == "*":
            close = text.find("*/", i + 2)
            i = len(text) if close == -1 else close + 2
            continue
        if ch in "\"'":
            i += 1
            while i < len(text) and text[i] != ch and text[i] != "\n":
                i += 2 if text[i] == "\\" else 1
            i += 1
            continue
        if ch in "()":
            yield i, ch
        i += 1


def _open_parens(text: str, end: int) -> list[int]:
    """Offsets of parentheses still open at *end*, outermost first."""
    stack: list[int] = []
    for i, ch in _code_parens(text, 0, end):
        if ch == "(":
            stack.append(i)
        elif stack:
            stack.pop()
    return stack


def _matching_paren(text: str, open_paren: int) -> int | None:
    depth = 0
    for i, ch in _code_parens(text, open_paren, len(text)):
        depth += 1 if ch == "(" else -1
        if depth == 0:
            return i
    return None


def _line_window(text: str, end: int) -> str:
    """Whole lines of *text* within ``_LOOKBEHIND`` characters of *end*."""
    lo = max(0, end - _LOOKBEHIND)
    if lo > 0:
        newline = text.find("\n", lo, end)
        lo = end if newline == -1 else newline + 1
    return text[lo:end]


def _strip_trailing_comments(before: str) -> str:
    while True:
        before = before.rstrip()
        if before.endswith("*/"):
            start = before.rfind("/*")
            if start == -1:
                return before
            before = before[:start]
            continue
        comment = before.find("//", before.rfind("\n") + 1)
        if comment == -1:
            return before
        before = before[:comment]


def _declares(text: str, start: int) -> bool:
    """True when the token before *start* makes the name a declaration."""
    before = _strip_trailing_comments(_line_window(text, start))
    if not before:
        return False
    last = before[-1]
    if last in "@]":
        return True
    if last == ">":
        # ``List<String> name(`` but not ``a > name(`` or ``x -> name(``
        return len(before) > 1 and (before[-2].isalnum() or before[-2] in "_$>]?")
    word = _TRAILING_WORD_RE.search(before)
    return word is not None and word.group() not in EXPRESSION_KEYWORDS


def _has_body(text: str, open_paren: int) -> bool:
    close = _matching_paren(text, open_paren)
    if close is None:
        return False
    return _DECLARATION_TAIL_RE.match(text, close + 1) is not None


def _callee_before(text: str, open_paren: int) -> CallSite | None:
    match = _CALLEE_RE.search(text, max(0, open_paren - _LOOKBEHIND), open_paren)
    if match is None:
        return None
    name = match.group("name")
    if name in NON_CALL_KEYWORDS:
        return None
    is_constructor = match.group("new") is not None
    if not is_constructor:
        if match.group("type_args") or _declares(text, match.start()):
            return None
        if _has_body(text, open_paren):
            return None
    qualifier = match.group("qualifier")
    if qualifier:
        qualifier = re.sub(r"\s+", "", qualifier)
    return CallSite(
        name=name,
        qualifier=qualifier or None,
        open_paren=open_paren,
        is_constructor=is_constructor,
    )


def find_call_at(text: str, offset: int) -> CallSite | None:
    """Return the innermost call whose argument list encloses *offset*.

    Parenthesised control constructs (``if (``, ``while (``) are skipped
    in favour of the next enclosing call, as are method and constructor
    declarations and annotations. Returns None when the caret sits
    outside every call's parentheses.
    """
    if offset < 0 or offset > len(text):
        msg = f"offset {offset} outside buffer of length {len(text)}"
        raise ValueError(msg)
    for open_paren in reversed(_open_parens(text, offset)):
        site = _callee_before(text, open_paren)
        if site is not None:
            return site
    return None
