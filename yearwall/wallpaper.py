"""
Wallpaper composition

Turns resolved parameters and the current instant into a layout tree and
renders it. The whole pipeline is rebuilt per call and keeps no state.
"""

import time

from yearwall.calendar_model import build_year, get_day_state, is_weekend, week_rows
from yearwall.date_utils import year_progress
from yearwall.image_renderer import WallpaperImageRenderer, to_png_bytes
from yearwall.layout import CENTER, COLUMN, ROW, START, Box, Text
from yearwall.logger import log
from yearwall.numbers import round_half_up
from yearwall.params import (
    FOOTER_DAYS_LEFT,
    FOOTER_DAYS_LEFT_PERCENT_LEFT,
    FOOTER_DAYS_PASSED,
    FOOTER_NONE,
    FOOTER_PERCENT_LEFT,
    FOOTER_PERCENT_PASSED,
)
from yearwall.styles import Geometry, build_cell, build_placeholder, get_cell_color

# Footer wording is Ukrainian for every display language
FOOTER_TEMPLATES = {
    FOOTER_DAYS_LEFT: "{days_left} днів залишилось",
    FOOTER_DAYS_PASSED: "{day_of_year} днів пройдено",
    FOOTER_PERCENT_LEFT: "{percent_left}% залишилось",
    FOOTER_PERCENT_PASSED: "{percent_passed}% пройдено",
    FOOTER_DAYS_LEFT_PERCENT_LEFT: "{days_left} днів · {percent_left}% залишилось",
}

YEAR_OPACITY = 0.15
IDLE_MONTH_OPACITY = 0.4
FOOTER_OPACITY = 0.5


def footer_text(footer, progress):
    """Footer string for a footer mode, '' for none"""
    if footer == FOOTER_NONE:
        return ""
    return FOOTER_TEMPLATES[footer].format(
        days_left=progress.days_left,
        day_of_year=progress.day_of_year,
        percent_left=progress.percent_left,
        percent_passed=progress.percent_passed,
    )


def background_color(theme, opacity):
    """Theme background, or black at 1 - opacity/100 alpha when opacity > 0"""
    if opacity > 0:
        return (0, 0, 0, round_half_up((1 - opacity / 100) * 255))
    return theme.background


def build_month_block(params, progress, grid, geometry):
    theme = params.theme
    current = grid.month == progress.month
    label = Text(
        params.locale.months[grid.month],
        geometry.month_font_size,
        theme.today if current else theme.text,
        weight=600,
        opacity=1.0 if current else IDLE_MONTH_OPACITY,
        letter_spacing=0.08,
        uppercase=True,
        margin_bottom=round_half_up(geometry.gap * 0.5),
    )

    rows = []
    for week in week_rows(grid.cells):
        cells = []
        for day in week:
            if day is None:
                cells.append(build_placeholder(geometry))
                continue
            state = get_day_state(grid.month, day, progress.month, progress.day)
            weekend = is_weekend(progress.year, grid.month, day)
            color = get_cell_color(state, weekend, params.weekend_mode, theme)
            cells.append(build_cell(params.style, day, state, color, theme, geometry))
        rows.append(Box(cells, direction=ROW, gap=geometry.gap, align=CENTER))

    weeks = Box(rows, direction=COLUMN, gap=geometry.gap, align=START)
    return Box(
        [label, weeks],
        direction=COLUMN,
        gap=round_half_up(geometry.gap * 0.5),
        align=START,
    )


def build_wallpaper_layout(params, progress):
    """
    Compose the full layout tree.

    Args:
        params (WallpaperParams): Resolved request parameters
        progress (YearProgress): Date facts for 'now'

    Returns:
        Box: Root node sized to the device screen
    """
    device = params.device
    theme = params.theme
    geometry = Geometry(device.width, params.scale)

    year_label = Text(
        str(progress.year),
        geometry.year_font_size,
        theme.text,
        weight=700,
        opacity=YEAR_OPACITY,
        letter_spacing=0.1,
        margin_bottom=round_half_up(device.height * 0.04),
    )

    months = Box(
        [build_month_block(params, progress, grid, geometry) for grid in build_year(progress.year)],
        direction=ROW,
        wrap=True,
        gap=round_half_up(device.width * 0.05),
        align=START,
        justify=CENTER,
        padding_x=round_half_up(device.width * 0.06),
    )

    children = [year_label, months]
    if params.footer != FOOTER_NONE:
        children.append(
            Text(
                footer_text(params.footer, progress),
                geometry.footer_font_size,
                theme.text,
                weight=300,
                opacity=FOOTER_OPACITY,
                letter_spacing=0.06,
                margin_top=round_half_up(device.height * 0.05),
            )
        )

    return Box(
        children,
        direction=COLUMN,
        align=CENTER,
        justify=CENTER,
        width=device.width,
        height=device.height,
    )


def render_wallpaper(params, now=None):
    """
    Render a wallpaper image.

    Args:
        params (WallpaperParams): Resolved request parameters
        now (datetime, optional): Naive UTC instant, defaults to the clock

    Returns:
        PIL.Image: Image sized exactly to the device profile
    """
    start = time.perf_counter()
    progress = year_progress(params.timezone, now)

    renderer = WallpaperImageRenderer(params.device.width, params.device.height)
    root = renderer.layout(build_wallpaper_layout(params, progress))
    image = renderer.render(root, background_color(params.theme, params.opacity))

    elapsed = (time.perf_counter() - start) * 1000
    log(
        f"Rendered {params.device.name} {params.style.value} {params.theme.name} "
        f"{params.device.width}x{params.device.height} for {progress!r} in {elapsed:.0f}ms"
    )
    return image


def render_wallpaper_png(params, now=None):
    """Render a wallpaper and return PNG bytes"""
    return to_png_bytes(render_wallpaper(params, now))
