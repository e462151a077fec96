"""Board theme presets.

Themes are passive data for the renderer. The set of color schemes is closed,
so each scheme is an enum member carrying its colors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from PyQt6.QtCore import QObject, pyqtSignal


RGB = Tuple[int, int, int]

SELECTED_GREEN: RGB = (51, 204, 51)
HINTED_RED: RGB = (204, 51, 51)
LABEL_DARK: RGB = (51, 51, 51)
LABEL_LIGHT: RGB = (204, 204, 204)


@dataclass(frozen=True)
class ColorSchemeColors:
    """Colors of one scheme, as RGB tuples."""
    light: RGB  # Light squares
    dark: RGB  # Dark squares
    label: RGB  # Coordinate labels
    selected: RGB  # Selected square and drop target outline
    hinted: RGB  # Hinted square outline


class ColorScheme(Enum):
    """Named board color schemes."""
    LIGHT = "light"
    DARK = "dark"
    ORANGE = "orange"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    PURPLE = "purple"

    @property
    def colors(self) -> ColorSchemeColors:
        return _SCHEME_COLORS[self]

    @property
    def light(self) -> RGB:
        return self.colors.light

    @property
    def dark(self) -> RGB:
        return self.colors.dark

    @property
    def label(self) -> RGB:
        return self.colors.label

    @property
    def selected(self) -> RGB:
        return self.colors.selected

    @property
    def hinted(self) -> RGB:
        return self.colors.hinted


_SCHEME_COLORS = {
    ColorScheme.LIGHT: ColorSchemeColors((242, 242, 242), (217, 217, 217), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.DARK: ColorSchemeColors((51, 51, 51), (26, 26, 26), LABEL_LIGHT, SELECTED_GREEN, HINTED_RED),
    ColorScheme.ORANGE: ColorSchemeColors((255, 217, 153), (255, 166, 64), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.BLUE: ColorSchemeColors((217, 242, 255), (140, 191, 255), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.GREEN: ColorSchemeColors((217, 255, 217), (140, 255, 140), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.RED: ColorSchemeColors((255, 217, 217), (255, 140, 140), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.YELLOW: ColorSchemeColors((255, 255, 217), (255, 255, 140), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
    ColorScheme.PURPLE: ColorSchemeColors((217, 217, 255), (140, 140, 255), LABEL_DARK, SELECTED_GREEN, HINTED_RED),
}


class PieceStyle(Enum):
    """Piece image sets."""
    USCF = "uscf"
    CLASSIC = "classic"
    MODERN = "modern"
    WOOD = "wood"
    MARBLE = "marble"

    @property
    def display_name(self) -> str:
        if self is PieceStyle.USCF:
            return "USCF"
        return self.value.capitalize()

    @property
    def folder_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class ChessboardTheme:
    """A color scheme paired with a piece style."""
    color_scheme: ColorScheme
    piece_style: PieceStyle


class ChessboardThemes:
    """Preset themes."""
    DEFAULT_LIGHT = ChessboardTheme(ColorScheme.LIGHT, PieceStyle.USCF)
    DEFAULT_DARK = ChessboardTheme(ColorScheme.DARK, PieceStyle.USCF)
    CLASSIC_WOOD = ChessboardTheme(ColorScheme.ORANGE, PieceStyle.WOOD)
    MODERN_BLUE = ChessboardTheme(ColorScheme.BLUE, PieceStyle.MODERN)
    ELEGANT_MARBLE = ChessboardTheme(ColorScheme.PURPLE, PieceStyle.MARBLE)


def theme_from_config(theme_config: dict) -> ChessboardTheme:
    """Build a theme from the board.theme config section.

    Unknown names fall back to the default light theme's parts.

    Args:
        theme_config: Dict with optional 'color_scheme' and 'piece_style' names.

    Returns:
        ChessboardTheme instance.
    """
    try:
        color_scheme = ColorScheme(theme_config.get('color_scheme', ColorScheme.LIGHT.value))
    except ValueError:
        color_scheme = ColorScheme.LIGHT
    try:
        piece_style = PieceStyle(theme_config.get('piece_style', PieceStyle.USCF.value))
    except ValueError:
        piece_style = PieceStyle.USCF
    return ChessboardTheme(color_scheme, piece_style)


class ThemeModel(QObject):
    """Model holding the active theme."""

    theme_changed = pyqtSignal(object)  # Emitted with the new ChessboardTheme

    def __init__(self, theme: ChessboardTheme = ChessboardThemes.DEFAULT_LIGHT) -> None:
        super().__init__()
        self._theme = theme

    @property
    def theme(self) -> ChessboardTheme:
        return self._theme

    @property
    def color_scheme(self) -> ColorScheme:
        return self._theme.color_scheme

    @property
    def piece_style(self) -> PieceStyle:
        return self._theme.piece_style

    def set_theme(self, theme: ChessboardTheme) -> None:
        """Replace the theme, emitting theme_changed if it differs."""
        if theme != self._theme:
            self._theme = theme
            self.theme_changed.emit(theme)

    def set_color_scheme(self, color_scheme: ColorScheme) -> None:
        self.set_theme(ChessboardTheme(color_scheme, self._theme.piece_style))

    def set_piece_style(self, piece_style: PieceStyle) -> None:
        self.set_theme(ChessboardTheme(self._theme.color_scheme, piece_style))
