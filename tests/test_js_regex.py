import re

import pytest
from django.core import validators

from client_validation.js_regex import UntranslatableRegexError, to_js_regex


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (r"^[a-z]+\Z", "^[a-z]+$"),
        (r"\A\d{4}\Z", r"^\d{4}$"),
        (r"^(?P<year>\d{4})-(?P=year)$", r"^(?<year>\d{4})-\k<year>$"),
        (r"^(?:ab|cd)(?=x)(?<!y)$", r"^(?:ab|cd)(?=x)(?<!y)$"),
        (r"^\\Z$", r"^\\Z$"),
        (r"^[\Z]$", r"^[\Z]$"),
        (r"^[]a]+$", r"^[\]a]+$"),
        (r"^[^]a]+$", r"^[^\]a]+$"),
    ],
)
def test_translates_python_only_syntax(pattern, expected):
    assert to_js_regex(pattern) == (expected, "")


def test_flags_become_letters():
    assert to_js_regex("^a.b$", re.IGNORECASE | re.DOTALL) == ("^a.b$", "is")


def test_anchors_under_multiline_stay_whole_input():
    pattern, flags = to_js_regex(r"\Aa$\Z", re.MULTILINE)

    assert pattern == r"(?<![\s\S])a$(?![\s\S])"
    assert flags == "m"


def test_django_builtin_validators_translate():
    slug, _ = to_js_regex(validators.validate_slug.regex.pattern, validators.validate_slug.regex.flags)
    int_list, _ = to_js_regex(validators.int_list_validator().regex.pattern)

    assert slug.endswith("+$")
    assert "\\Z" not in int_list


@pytest.mark.parametrize(
    "pattern, flags",
    [
        (r"^a+$", re.VERBOSE),
        (r"^(?i:a)b$", 0),
        (r"^(?>ab)c$", 0),
        (r"^(?#note)a$", 0),
        (r"^(a)?(?(1)b|c)$", 0),
        (r"^a++$", 0),
        (r"^\N{EM DASH}$", 0),
    ],
)
def test_untranslatable_constructs_raise(pattern, flags):
    with pytest.raises(UntranslatableRegexError):
        to_js_regex(pattern, flags)
