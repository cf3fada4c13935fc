"""
Python ``re`` patterns as JavaScript ``RegExp`` source.

The two dialects share most syntax, but a few Python constructs either fail
to parse in the browser or silently mean something else there (``\\Z`` is a
literal ``Z`` in JavaScript). Those are rewritten. Anything without a faithful
rewrite raises ``UntranslatableRegexError`` so the caller can leave the rule
to the server.
"""

from __future__ import annotations

import re
from typing import List, Tuple

# Python flags with a JavaScript RegExp flag letter.
JS_REGEX_FLAGS: Tuple[Tuple[int, str], ...] = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)

# Global inline flags such as (?i); their effect is already in ``regex.flags``.
LEADING_INLINE_FLAGS_RE = re.compile(r"\(\?[aiLmsux]+\)")

# Group openings both dialects read the same way.
SHARED_GROUP_PREFIXES = ("(?:", "(?=", "(?!", "(?<=", "(?<!")

# Escapes JavaScript reads differently without the ``u`` flag.
UNSUPPORTED_ESCAPES = frozenset("NU")

QUANTIFIERS = frozenset("*+?}")


class UntranslatableRegexError(ValueError):
    """Raised for a construct with no JavaScript equivalent."""


def _translate_group(pattern: str, i: int, out: List[str]) -> int:
    if pattern.startswith("(?P<", i):
        out.append("(?<")
        return i + 4

    if pattern.startswith("(?P=", i):
        end = pattern.find(")", i)
        if end == -1:
            raise UntranslatableRegexError("unterminated (?P= backreference")
        out.append(f"\\k<{pattern[i + 4:end]}>")
        return end + 1

    for prefix in SHARED_GROUP_PREFIXES:
        if pattern.startswith(prefix, i):
            out.append(prefix)
            return i + len(prefix)

    raise UntranslatableRegexError(f"group {pattern[i:i + 4]!r}")


def to_js_regex(pattern: str, flags: int = 0) -> Tuple[str, str]:
    """
    Translate ``pattern`` compiled with ``flags`` into ``(source, flag_letters)``
    for ``new RegExp(source, flag_letters)``.

    ``\\A`` and ``\\Z`` become ``^`` and ``$`` (lookarounds under
    ``re.MULTILINE``), named groups and named backreferences use the
    JavaScript spelling, and a leading ``[]`` in a class is escaped.
    """
    if flags & re.VERBOSE:
        raise UntranslatableRegexError("re.VERBOSE")

    js_flags = "".join(letter for flag, letter in JS_REGEX_FLAGS if flags & flag)
    multiline = bool(flags & re.MULTILINE)

    leading = LEADING_INLINE_FLAGS_RE.match(pattern)
    if leading:
        pattern = pattern[leading.end():]

    out: List[str] = []
    in_class = False
    i = 0

    while i < len(pattern):
        char = pattern[i]

        if char == "\\":
            escape = pattern[i:i + 2]
            if escape[1:] in UNSUPPORTED_ESCAPES:
                raise UntranslatableRegexError(f"escape {escape!r}")
            if not in_class and escape == "\\A":
                out.append(r"(?<![\s\S])" if multiline else "^")
            elif not in_class and escape == "\\Z":
                out.append(r"(?![\s\S])" if multiline else "$")
            else:
                out.append(escape)
            i += 2
            continue

        if in_class:
            if char == "]":
                in_class = False
            out.append(char)
            i += 1
            continue

        if char == "[":
            in_class = True
            out.append(char)
            i += 1
            if pattern.startswith("^", i):
                out.append("^")
                i += 1
            # A leading "]" is literal in Python but closes an empty class in JavaScript.
            if pattern.startswith("]", i):
                out.append("\\]")
                i += 1
            continue

        if pattern.startswith("(?", i):
            i = _translate_group(pattern, i, out)
            continue

        if char in QUANTIFIERS and pattern.startswith("+", i + 1):
            raise UntranslatableRegexError("possessive quantifier")

        out.append(char)
        i += 1

    return "".join(out), js_flags
