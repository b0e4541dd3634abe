"""
Query parameter parsing for wallpaper requests

Every parameter is optional. Missing or empty values take their default,
unknown catalog keys fall back to the catalog default and numbers are parsed
leniently, so parse_params() never fails.
"""

from collections import namedtuple

from yearwall.catalogs import (
    resolve_calendar_size,
    resolve_device,
    resolve_locale,
    resolve_theme,
)
from yearwall.logger import log
from yearwall.numbers import clamp, parse_float_prefix, parse_int_prefix
from yearwall.styles import resolve_style, resolve_weekend_mode

FOOTER_NONE = "none"
FOOTER_DAYS_LEFT = "days_left"
FOOTER_DAYS_PASSED = "days_passed"
FOOTER_PERCENT_LEFT = "percent_left"
FOOTER_PERCENT_PASSED = "percent_passed"
FOOTER_DAYS_LEFT_PERCENT_LEFT = "days_left_percent_left"
FOOTER_MODES = (
    FOOTER_NONE,
    FOOTER_DAYS_LEFT,
    FOOTER_DAYS_PASSED,
    FOOTER_PERCENT_LEFT,
    FOOTER_PERCENT_PASSED,
    FOOTER_DAYS_LEFT_PERCENT_LEFT,
)

DEFAULT_FOOTER = FOOTER_DAYS_LEFT_PERCENT_LEFT
DEFAULT_OPACITY = 0
DEFAULT_TIMEZONE = 2.0

# Real-world civil offsets span UTC-12..UTC+14
MIN_TIMEZONE = -14.0
MAX_TIMEZONE = 14.0

PARAM_NAMES = (
    "model",
    "style",
    "calendar_size",
    "weekend_mode",
    "opacity",
    "theme",
    "lang",
    "timezone",
    "footer",
)

WallpaperParams = namedtuple(
    "WallpaperParams",
    [
        "device",
        "style",
        "calendar_size",
        "scale",
        "weekend_mode",
        "opacity",
        "theme",
        "locale",
        "timezone",
        "footer",
    ],
)


def _first(query, key):
    """Single value for key from a parse_qs or plain mapping; '' counts as missing"""
    value = query.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or value == "":
        return None
    return value


def resolve_footer(footer):
    if footer in FOOTER_MODES:
        return footer
    if footer is not None:
        log(f"Unknown footer '{footer}', using fallback: {DEFAULT_FOOTER}")
    return DEFAULT_FOOTER


def parse_opacity(value):
    """Integer percentage 0..100, 0 when missing or not a number"""
    opacity = parse_int_prefix(value)
    if opacity is None:
        if value is not None:
            log(f"Invalid opacity '{value}', using fallback: {DEFAULT_OPACITY}")
        return DEFAULT_OPACITY
    return clamp(opacity, 0, 100)


def parse_timezone(value):
    """Fractional hours offset from UTC, 2 when missing or not a number"""
    offset = parse_float_prefix(value)
    if offset is None:
        if value is not None:
            log(f"Invalid timezone '{value}', using fallback: {DEFAULT_TIMEZONE}")
        return DEFAULT_TIMEZONE
    return clamp(offset, MIN_TIMEZONE, MAX_TIMEZONE)


def parse_params(query):
    """
    Resolve request parameters.

    Args:
        query (dict): Output of urllib.parse.parse_qs, or a plain str -> str dict

    Returns:
        WallpaperParams: Fully resolved parameters
    """
    calendar_size, scale = resolve_calendar_size(_first(query, "calendar_size"))
    return WallpaperParams(
        device=resolve_device(_first(query, "model")),
        style=resolve_style(_first(query, "style")),
        calendar_size=calendar_size,
        scale=scale,
        weekend_mode=resolve_weekend_mode(_first(query, "weekend_mode")),
        opacity=parse_opacity(_first(query, "opacity")),
        theme=resolve_theme(_first(query, "theme")),
        locale=resolve_locale(_first(query, "lang")),
        timezone=parse_timezone(_first(query, "timezone")),
        footer=resolve_footer(_first(query, "footer")),
    )
