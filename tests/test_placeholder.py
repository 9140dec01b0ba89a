from __future__ import annotations

import re

import pytest

from keytrace.core.placeholder import placeholder


def test_leading_digit_keeps_digit_after_underscore():
    assert placeholder("9abc") == "{_9abc}"


def test_leading_digit_collapsed():
    assert placeholder("9abc", collapse_leading_digit=True) == "{_abc}"


def test_section_and_key_joined():
    assert placeholder("Section", "1Key") == "{Section__1Key}"


def test_section_and_key_collapsed():
    assert placeholder("Section", "1Key", collapse_leading_digit=True) == "{Section__Key}"


def test_disallowed_characters_replaced():
    assert placeholder("Db:Connection-String") == "{Db_Connection_String}"


def test_period_kept():
    assert placeholder("app.settings") == "{app.settings}"


def test_blank_parts_skipped():
    assert placeholder(None, "", "   ", "Key", "\t") == "{Key}"


def test_no_parts():
    assert placeholder() == "{}"


def test_digit_only_checked_at_part_start():
    assert placeholder("a1", "2b") == "{a1__2b}"


def test_inner_whitespace_replaced():
    assert placeholder(" a b ") == "{_a_b_}"


def test_unicode_letters_kept():
    assert placeholder("Größe") == "{Größe}"


@pytest.mark.parametrize(
    "parts",
    [("x y", "z!"), ("1", "2", "3"), ("$", "é"), ("a.b", "-c-")],
)
def test_output_alphabet(parts):
    result = placeholder(*parts)
    assert result.startswith("{") and result.endswith("}")
    assert re.fullmatch(r"\{[\w.]*\}", result)
