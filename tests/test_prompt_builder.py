"""Tests for the wrap prompt builder."""

from __future__ import annotations

import pytest

from trailer_studio.catalog import ColorTheme, get_model, get_theme
from trailer_studio.imggen.prompt_builder import (
    BRANDING_INTRO,
    CLOSING_CLAUSE,
    LOGO_CLAUSE,
    STYLE_CLAUSES,
    BrandingDetails,
    PromptBuilder,
    PromptValidationError,
    ThemeStyle,
)

AQUA = STYLE_CLAUSES[ThemeStyle.FRESH_AQUA]
ECO = STYLE_CLAUSES[ThemeStyle.ECO_BRIGHT]
PATRIOTIC = STYLE_CLAUSES[ThemeStyle.DEFAULT]


def _custom_theme(name: str) -> ColorTheme:
    return ColorTheme(
        id="custom",
        name=name,
        description="a custom palette",
        gradient_text="",
        gradient_border="",
        glow="",
    )


def test_fresh_aqua_example_prompt() -> None:
    prompt = PromptBuilder().build(
        get_model("single-cold"),
        get_theme("fresh-aqua"),
        BrandingDetails(slogan="Keep It Cold"),
        has_logo=False,
    )

    assert AQUA in prompt
    assert PATRIOTIC not in prompt
    assert prompt.count('Slogan: "Keep It Cold".') == 1
    assert "Website:" not in prompt
    assert "Phone:" not in prompt
    assert LOGO_CLAUSE not in prompt
    assert prompt.endswith(f'{BRANDING_INTRO} Slogan: "Keep It Cold".{CLOSING_CLAUSE}')


def test_theme_name_and_description_are_interpolated() -> None:
    theme = get_theme("eco-bright")
    prompt = PromptBuilder().build(get_model("double-hot"), theme)

    assert f'Now apply the selected theme creatively: "Eco Bright" ({theme.description}).' in prompt
    assert ECO in prompt
    assert PATRIOTIC not in prompt
    assert AQUA not in prompt


@pytest.mark.parametrize("name", ["American Classic", "Midnight Black", "fresh aqua", ""])
def test_other_theme_names_use_default_clause(name: str) -> None:
    prompt = PromptBuilder().build(get_model("single-cold"), _custom_theme(name))

    assert PATRIOTIC in prompt
    assert AQUA not in prompt
    assert ECO not in prompt


def test_empty_branding_and_no_logo_add_no_optional_clauses() -> None:
    prompt = PromptBuilder().build(get_model("single-cold"), get_theme("american-classic"), BrandingDetails())

    assert LOGO_CLAUSE not in prompt
    assert BRANDING_INTRO not in prompt
    assert prompt.endswith(
        "clean reflections, and professional presentation." + CLOSING_CLAUSE
    )


def test_single_branding_field_is_labelled() -> None:
    prompt = PromptBuilder().build(
        get_model("single-cold"),
        get_theme("fresh-aqua"),
        BrandingDetails(phone="555-0100"),
    )

    assert f'{BRANDING_INTRO} Phone: "555-0100".{CLOSING_CLAUSE}' in prompt
    assert "Slogan:" not in prompt


def test_logo_and_branding_clauses_keep_fixed_order() -> None:
    prompt = PromptBuilder().build(
        get_model("double-hot"),
        get_theme("fresh-aqua"),
        BrandingDetails(slogan="Cold", website="example.com", phone="123"),
        has_logo=True,
    )

    expected_tail = (
        LOGO_CLAUSE
        + BRANDING_INTRO
        + ' Slogan: "Cold". Website: "example.com". Phone: "123".'
        + CLOSING_CLAUSE
    )
    assert prompt.endswith(expected_tail)


def test_base_instructions_reference_official_images() -> None:
    prompt = PromptBuilder().build(get_model("single-cold"), get_theme("fresh-aqua"))

    assert prompt.startswith("You are a professional commercial vehicle wrap designer.")
    assert "- Single Cold: https://i.imgur.com/wzKkCcR.png" in prompt
    assert "use this fallback: https://i.imgur.com/u5a2S0X.png." in prompt


def test_missing_model_or_theme_is_rejected() -> None:
    builder = PromptBuilder()

    with pytest.raises(PromptValidationError):
        builder.build(None, get_theme("fresh-aqua"))
    with pytest.raises(PromptValidationError):
        builder.build(get_model("single-cold"), None)


def test_every_theme_style_has_a_clause() -> None:
    assert set(STYLE_CLAUSES) == set(ThemeStyle)


def test_branding_with_field_replaces_record() -> None:
    original = BrandingDetails()
    updated = original.with_field("website", "example.com")

    assert original.website == ""
    assert updated == BrandingDetails(website="example.com")
    with pytest.raises(ValueError):
        original.with_field("email", "a@b.c")
