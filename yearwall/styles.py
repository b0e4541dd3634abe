"""
Cell colours and per-style cell shapes

Each Style member has a builder in CELL_BUILDERS turning a day cell
(colour, state) into a layout node. Sizes all derive from Geometry.dot_size.
"""

from enum import Enum

from yearwall.calendar_model import FUTURE, PAST, TODAY
from yearwall.layout import CENTER, Box, Shape, Text
from yearwall.logger import log
from yearwall.numbers import round_half_up

# Weekend modes
WEEKEND_NONE = "none"
WEEKEND_ONLY = "weekends_only"
WEEKEND_ALL = "all"
WEEKEND_MODES = (WEEKEND_NONE, WEEKEND_ONLY, WEEKEND_ALL)
DEFAULT_WEEKEND_MODE = WEEKEND_ONLY

# Alpha suffixes appended to #rrggbb colours
PAST_WEEKEND_ALPHA = "66"
FUTURE_WEEKEND_ALPHA = "aa"
TODAY_HIGHLIGHT_ALPHA = "20"


class Style(Enum):
    DOTS = "dots"
    DOTS_MINI = "dots_mini"
    NUMBERS = "numbers"
    NUMBERS_BOLD = "numbers_bold"
    SQUARES = "squares"
    SQUARES_ROUNDED = "squares_rounded"
    LINES = "lines"
    BARS = "bars"


DEFAULT_STYLE = Style.DOTS


def resolve_style(name):
    """Style member for a query value, falling back to dots"""
    try:
        return Style(name)
    except ValueError:
        if name is not None:
            log(f"Unknown style '{name}', using fallback: {DEFAULT_STYLE.value}")
        return DEFAULT_STYLE


def resolve_weekend_mode(mode):
    if mode in WEEKEND_MODES:
        return mode
    if mode is not None:
        log(f"Unknown weekend_mode '{mode}', using fallback: {DEFAULT_WEEKEND_MODE}")
    return DEFAULT_WEEKEND_MODE


def with_alpha(color, alpha_hex):
    """Append a two digit alpha to the #rrggbb part of a colour"""
    return color[:7] + alpha_hex


def get_cell_color(state, weekend, weekend_mode, theme):
    """
    Resolve the colour of a day cell.

    Args:
        state (str): PAST, TODAY or FUTURE
        weekend (bool): Cell falls on Saturday or Sunday
        weekend_mode (str): none, weekends_only or all
        theme (Theme): Active colour theme

    Returns:
        str: Hex colour, possibly with an alpha suffix
    """
    if state == TODAY:
        return theme.today
    if state == PAST:
        if weekend_mode != WEEKEND_NONE and weekend:
            return with_alpha(theme.today, PAST_WEEKEND_ALPHA)
        return theme.past
    if weekend_mode == WEEKEND_ALL and weekend:
        return with_alpha(theme.future, FUTURE_WEEKEND_ALPHA)
    return theme.future


class Geometry:
    """Pixel sizes derived from the device width and the calendar scale"""

    def __init__(self, width, scale=1):
        self.base_px = round_half_up(width / 30 * scale)
        self.dot_size = max(8, round_half_up(self.base_px * 0.55))
        self.gap = max(4, round_half_up(self.dot_size * 0.35))
        self.month_font_size = round_half_up(self.base_px * 0.45)
        self.footer_font_size = round_half_up(width * 0.035)
        self.year_font_size = round_half_up(width * 0.08)

    def __repr__(self):
        return f"Geometry(dot_size={self.dot_size}, gap={self.gap})"


def _dot_cell(style, day, state, color, theme, geometry):
    size = geometry.dot_size
    if style is Style.DOTS_MINI:
        size = round_half_up(size * 0.7)
    future = state == FUTURE
    scale = 1.25 if state == TODAY else 1.0
    return Shape(
        size,
        size,
        fill=None if future else color,
        border=theme.future if future else None,
        circle=True,
        scale_x=scale,
        scale_y=scale,
    )


def _number_cell(style, day, state, color, theme, geometry):
    size = geometry.dot_size + 6
    today = state == TODAY
    label = Text(
        str(day),
        round_half_up(geometry.dot_size * 0.7),
        color,
        weight=700 if style is Style.NUMBERS_BOLD else 400,
    )
    return Box(
        [label],
        align=CENTER,
        justify=CENTER,
        width=size,
        height=size,
        background=with_alpha(color, TODAY_HIGHLIGHT_ALPHA) if today else None,
        circle=today,
    )


def _square_cell(style, day, state, color, theme, geometry):
    size = geometry.dot_size
    future = state == FUTURE
    radius = round_half_up(size * 0.25) if style is Style.SQUARES_ROUNDED else 2
    scale = 1.2 if state == TODAY else 1.0
    return Shape(
        size,
        size,
        fill=None if future else color,
        border=theme.future if future else None,
        radius=radius,
        scale_x=scale,
        scale_y=scale,
    )


def _line_cell(style, day, state, color, theme, geometry):
    size = geometry.dot_size
    return Shape(
        round_half_up(size * 0.25),
        size,
        fill=theme.future if state == FUTURE else color,
        radius=2,
        scale_y=1.3 if state == TODAY else 1.0,
    )


def _bar_cell(style, day, state, color, theme, geometry):
    size = geometry.dot_size
    return Shape(
        size + 4,
        round_half_up(size * 0.5),
        fill=theme.future if state == FUTURE else color,
        radius=3,
    )


CELL_BUILDERS = {
    Style.DOTS: _dot_cell,
    Style.DOTS_MINI: _dot_cell,
    Style.NUMBERS: _number_cell,
    Style.NUMBERS_BOLD: _number_cell,
    Style.SQUARES: _square_cell,
    Style.SQUARES_ROUNDED: _square_cell,
    Style.LINES: _line_cell,
    Style.BARS: _bar_cell,
}


def build_cell(style, day, state, color, theme, geometry):
    """Layout node for one day cell in the given style"""
    return CELL_BUILDERS[style](style, day, state, color, theme, geometry)


def build_placeholder(geometry):
    """Empty slot before the first day of a month"""
    return Shape(geometry.dot_size, geometry.dot_size)
