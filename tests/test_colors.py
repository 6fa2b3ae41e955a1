from __future__ import annotations

import pytest

from goveectl.config import DEFAULT_PALETTE
from goveectl.core import resolve_color
from goveectl.errors import InvalidColor


def test_hex_token():
    color = resolve_color("ff0000")
    assert color.rgb == (255, 0, 0)
    assert color.hex == "ff0000"


def test_name_matches_hex():
    assert resolve_color("red") == resolve_color("ff0000")


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("Blue", (0, 0, 255)),
        ("WARM", (255, 119, 34)),
        ("#AACCFF", (170, 204, 255)),
        ("#ff5500", (255, 85, 0)),
        ("pink", (255, 85, 170)),
    ],
)
def test_names_and_prefixed_hex(token, expected):
    assert resolve_color(token).rgb == expected


def test_normalized_hex_is_lowercase_without_prefix():
    assert resolve_color("#FF5500").hex == "ff5500"


def test_default_palette_has_all_names():
    assert set(DEFAULT_PALETTE) == {
        "red",
        "green",
        "blue",
        "white",
        "warm",
        "cool",
        "purple",
        "orange",
        "yellow",
        "cyan",
        "pink",
    }


@pytest.mark.parametrize(
    "token", ["xyz", "ff00", "ff00000", "#", "", "gg0000", "##ff0000", "0x ff00"]
)
def test_invalid_tokens(token):
    with pytest.raises(InvalidColor):
        resolve_color(token)


def test_custom_palette():
    palette = {**DEFAULT_PALETTE, "teal": "008080"}
    assert resolve_color("teal", palette).rgb == (0, 128, 128)
    with pytest.raises(InvalidColor):
        resolve_color("teal")
