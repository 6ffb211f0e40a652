"""
Colour palettes and QSS generation for the model dashboard sidebar.
"""

from __future__ import annotations

from typing import Literal

SPACING = {
    "xs": "4px",
    "md": "12px",
}

TYPOGRAPHY = {
    "font_family": "Segoe UI, -apple-system, BlinkMacSystemFont, sans-serif",
    "mono_family": "Consolas, Menlo, monospace",
    "font_size_xs": "11px",
    "font_size_sm": "13px",
    "font_size_base": "15px",
    "font_size_lg": "17px",
    "font_size_xl": "22px",
    "font_weight_medium": "500",
    "font_weight_semibold": "600",
    "font_weight_bold": "700",
}

COLOR_ACCENTS = {
    "orange": "#FF9500",
    "green": "#34C759",
}

LIGHT_COLORS = {
    "background": "#F5F5F7",
    "surface": "#FFFFFF",
    "text_primary": "#000000",
    "text_secondary": "#6E6E73",
    "border": "#E5E5EA",
}

DARK_COLORS = {
    "background": "#000000",
    "surface": "#1C1C1E",
    "text_primary": "#FFFFFF",
    "text_secondary": "#98989D",
    "border": "#38383A",
}

ThemeMode = Literal["light", "dark"]


class Theme:
    def __init__(self, mode: ThemeMode = "dark"):
        self.mode = mode
        self.colors = LIGHT_COLORS if mode == "light" else DARK_COLORS

    def get_stylesheet(self) -> str:
        colors = self.colors
        font_family = TYPOGRAPHY["font_family"]

        return f"""
        QMainWindow {{
            background-color: {colors["background"]};
            color: {colors["text_primary"]};
        }}

        QLabel#TitleLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_xl"]};
            font-weight: {TYPOGRAPHY["font_weight_bold"]};
            color: {colors["text_primary"]};
        }}

        QLabel#SectionLabel {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_sm"]};
            font-weight: {TYPOGRAPHY["font_weight_semibold"]};
            color: {colors["text_secondary"]};
        }}

        QLabel#ModelName {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_base"]};
            font-weight: {TYPOGRAPHY["font_weight_medium"]};
            color: {colors["text_primary"]};
        }}

        QLabel#CurrentModelName {{
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_lg"]};
            font-weight: {TYPOGRAPHY["font_weight_semibold"]};
            color: {colors["text_primary"]};
        }}

        QLabel#ModelDetail {{
            font-family: {TYPOGRAPHY["mono_family"]};
            font-size: {TYPOGRAPHY["font_size_sm"]};
            color: {colors["text_secondary"]};
        }}

        QFrame#Card {{
            background-color: {colors["surface"]};
            border-radius: 16px;
            border: 1px solid {colors["border"]};
        }}

        QLabel#StatusPill {{
            background-color: {self._rgba(COLOR_ACCENTS["orange"], 0.15)};
            color: {COLOR_ACCENTS["orange"]};
            border-radius: 12px;
            padding: {SPACING["xs"]} {SPACING["md"]};
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_xs"]};
            font-weight: {TYPOGRAPHY["font_weight_medium"]};
        }}

        QLabel#StatusPillActive {{
            background-color: {self._rgba(COLOR_ACCENTS["green"], 0.15)};
            color: {COLOR_ACCENTS["green"]};
            border-radius: 12px;
            padding: {SPACING["xs"]} {SPACING["md"]};
            font-family: {font_family};
            font-size: {TYPOGRAPHY["font_size_xs"]};
            font-weight: {TYPOGRAPHY["font_weight_medium"]};
        }}
        """

    def _rgba(self, hex_color: str, alpha: float) -> str:
        """Convert hex color to rgba string."""
        hex_color = hex_color.lstrip("#")
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
        return f"rgba({r}, {g}, {b}, {alpha})"
