"""Tests for the markup normalizer."""

from __future__ import annotations

import pytest

from pattern_validation.core.validation.markup import normalize_markup


def test_empty_input_yields_empty_output() -> None:
    assert normalize_markup("") == ""
    assert normalize_markup("   \n ") == ""


def test_default_image_markup_strips_to_nothing() -> None:
    """Class attributes and empty alt text leave bare tags, which are removed."""
    assert normalize_markup('<img class="x" alt="">') == ""
    assert normalize_markup('<figure class="wp-block-image size-large"><img alt=""/></figure>') == ""


def test_attributed_tag_is_preserved() -> None:
    """A tag that still carries an attribute is authored markup and survives."""
    out = normalize_markup('<a href="/x">text</a>')
    assert out.startswith('<a href="/x">')
    assert "text" in out
    # The bare closing tag carries no attributes, so it goes.
    assert out == '<a href="/x">text'


def test_non_empty_alt_text_is_kept() -> None:
    assert normalize_markup('<img alt="A cat"/>') == '<img alt="A cat"/>'


def test_text_inside_wrappers_survives() -> None:
    assert normalize_markup('<p class="has-text-align-center"><strong>Hi</strong> there</p>') == (
        "Hi there"
    )


def test_class_attribute_name_is_case_sensitive() -> None:
    """Only lowercase `class` is stripped; `CLASS` keeps the tag attributed."""
    assert normalize_markup('<p CLASS="x"></p>') == '<p CLASS="x">'


def test_stripping_order_exposes_bare_tags() -> None:
    """Removing class/alt first lets the bare-tag pass catch the leftover tag."""
    assert normalize_markup('<hr class="wp-block-separator"/>') == ""


@pytest.mark.parametrize(  # type: ignore[misc]
    "raw",
    [
        "",
        "<p></p>",
        '<a href="/x">text</a>',
        "<<b>i>",
        'clas class="x"s="y"',
        ' <div class="a">  <span>Hello</span> </div> ',
        '<img alt="" class="">',
    ],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize_markup(raw)
    assert normalize_markup(once) == once


def test_tag_names_with_digits_are_not_bare() -> None:
    """Only purely alphabetic tag names match the bare-tag pattern."""
    assert normalize_markup("<h2></h2>") == "<h2></h2>"
