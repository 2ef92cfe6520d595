"""
Theme catalogue. Each entry is a handful of colors; app.py turns them into a QPalette.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ThemeColors:
    background: str
    surface: str      # inputs, log view
    text: str
    primary: str      # highlight
    success: str      # log border, start/send buttons
    danger: str       # close/stop buttons


THEMES: Dict[str, ThemeColors] = {
    "Light":                ThemeColors("#FFFFFF", "#F2F2F2", "#000000", "#5E7CE2", "#12664F", "#C3423F"),
    "Dark":                 ThemeColors("#202225", "#2B2D31", "#E6E6E6", "#5E7CE2", "#12664F", "#C3423F"),
    "Dracula":              ThemeColors("#282A36", "#343746", "#F8F8F2", "#BD93F9", "#50FA7B", "#FF5555"),
    "Nord":                 ThemeColors("#2E3440", "#3B4252", "#ECEFF4", "#8FBCBB", "#A3BE8C", "#BF616A"),
    "Solarized Light":      ThemeColors("#FDF6E3", "#EEE8D5", "#586E75", "#268BD2", "#859900", "#DC322F"),
    "Solarized Dark":       ThemeColors("#002B36", "#073642", "#93A1A1", "#268BD2", "#859900", "#DC322F"),
    "Gruvbox Light":        ThemeColors("#FBF1C7", "#EBDBB2", "#282828", "#458588", "#98971A", "#CC241D"),
    "Gruvbox Dark":         ThemeColors("#282828", "#3C3836", "#FBF1C7", "#458588", "#98971A", "#CC241D"),
    "Catppuccin Latte":     ThemeColors("#EFF1F5", "#E6E9EF", "#4C4F69", "#8839EF", "#40A02B", "#D20F39"),
    "Catppuccin Frappé":    ThemeColors("#303446", "#292C3C", "#C6D0F5", "#CA9EE6", "#A6D189", "#E78284"),
    "Catppuccin Macchiato": ThemeColors("#24273A", "#1E2030", "#CAD3F5", "#C6A0F6", "#A6DA95", "#ED8796"),
    "Catppuccin Mocha":     ThemeColors("#1E1E2E", "#181825", "#CDD6F4", "#CBA6F7", "#A6E3A1", "#F38BA8"),
    "Tokyo Night":          ThemeColors("#1A1B26", "#16161E", "#9AA5CE", "#2AC3DE", "#9ECE6A", "#F7768E"),
    "Tokyo Night Storm":    ThemeColors("#24283B", "#1F2335", "#A9B1D6", "#7AA2F7", "#9ECE6A", "#F7768E"),
    "Tokyo Night Light":    ThemeColors("#D5D6DB", "#E9E9ED", "#565A6E", "#34548A", "#485E30", "#8C4351"),
    "Kanagawa Wave":        ThemeColors("#1F1F28", "#2A2A37", "#DCD7BA", "#7E9CD8", "#76946A", "#C34043"),
    "Kanagawa Dragon":      ThemeColors("#181616", "#282727", "#C5C9C5", "#8BA4B0", "#8A9A7B", "#C4746E"),
    "Kanagawa Lotus":       ThemeColors("#F2ECBC", "#E5DDB0", "#545464", "#4D699B", "#6F894E", "#C84053"),
    "Moonfly":              ThemeColors("#080808", "#1C1C1C", "#BDBDBD", "#80A0FF", "#8CC85F", "#FF5454"),
    "Nightfly":             ThemeColors("#011627", "#0E293F", "#ACB4C2", "#82AAFF", "#A1CD5E", "#FC514E"),
    "Oxocarbon":            ThemeColors("#161616", "#262626", "#F2F4F8", "#78A9FF", "#42BE65", "#EE5396"),
    "Ferra":                ThemeColors("#2B292D", "#383539", "#FECDB2", "#D1D1E0", "#B1B695", "#E06B75"),
}

THEME_NAMES = tuple(THEMES)
