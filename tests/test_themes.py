import re

from serialterm import config
from serialterm.themes import THEME_NAMES, THEMES

COLOR = re.compile(r"^#[0-9A-F]{6}$")


def test_default_theme_is_in_catalogue():
    assert config.DEFAULT_THEME in THEME_NAMES


def test_theme_colors_are_hex_rgb():
    for name, colors in THEMES.items():
        for value in vars(colors).values():
            assert COLOR.match(value), (name, value)


def test_catalogue_covers_every_named_palette():
    assert len(THEME_NAMES) == 22
    for name in ("Tokyo Night Storm", "Tokyo Night Light", "Kanagawa Dragon", "Kanagawa Lotus",
                 "Moonfly", "Nightfly", "Oxocarbon", "Ferra"):
        assert name in THEMES
