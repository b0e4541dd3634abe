"""
Static lookup tables: device screens, colour themes and locale names.

Every table has a default entry and a resolver that falls back to it when
the requested key is unknown. An unknown key is ordinary input, so resolvers
log the substitution instead of raising.
"""

from collections import namedtuple

from yearwall.logger import log

DeviceProfile = namedtuple("DeviceProfile", ["name", "width", "height"])
Theme = namedtuple("Theme", ["name", "background", "past", "today", "future", "text"])
Locale = namedtuple("Locale", ["lang", "months", "weekdays"])

DEFAULT_MODEL = "iphone_15_pro"
DEFAULT_THEME = "graphite_orange"
DEFAULT_LANG = "uk"
DEFAULT_CALENDAR_SIZE = "standard"

# iPhone screen resolutions (width, height)
MODELS = {
    "iphone_16_pro": (1206, 2622),
    "iphone_16": (1179, 2556),
    "iphone_15_pro": (1179, 2556),
    "iphone_15": (1179, 2556),
    "iphone_14_pro": (1179, 2556),
    "iphone_14": (1170, 2532),
    "iphone_13_pro": (1170, 2532),
    "iphone_13": (1170, 2532),
    "iphone_se": (750, 1334),
}

# Colour themes: (background, past, today, future, text)
THEMES = {
    "graphite_orange": ("#111111", "#ff8c4299", "#ff8c42", "#2a2a2a", "#ffffff"),
    "graphite_yellow": ("#111111", "#e8ff4799", "#e8ff47", "#2a2a2a", "#ffffff"),
    "graphite_green": ("#111111", "#4fffb099", "#4fffb0", "#2a2a2a", "#ffffff"),
    "graphite_blue": ("#111111", "#47b8ff99", "#47b8ff", "#2a2a2a", "#ffffff"),
    "graphite_red": ("#111111", "#ff474799", "#ff4747", "#2a2a2a", "#ffffff"),
    "graphite_pink": ("#111111", "#ff47c899", "#ff47c8", "#2a2a2a", "#ffffff"),
    "white_orange": ("#f5f5f5", "#ff8c4299", "#ff8c42", "#e0e0e0", "#111111"),
    "white_yellow": ("#f5f5f5", "#c8a80099", "#c8a800", "#e0e0e0", "#111111"),
    "white_blue": ("#f5f5f5", "#3b82f699", "#3b82f6", "#e0e0e0", "#111111"),
    "white_green": ("#f5f5f5", "#22c55e99", "#22c55e", "#e0e0e0", "#111111"),
    "black_white": ("#000000", "#ffffff99", "#ffffff", "#333333", "#ffffff"),
    "pure_white": ("#ffffff", "#88888899", "#333333", "#eeeeee", "#111111"),
}

MONTHS = {
    "uk": ["Січ", "Лют", "Бер", "Кві", "Тра", "Чер", "Лип", "Сер", "Вер", "Жов", "Лис", "Гру"],
    "ru": ["Янв", "Фев", "Мар", "Апр", "Май", "Июн", "Июл", "Авг", "Сен", "Окт", "Ноя", "Дек"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "pl": ["Sty", "Lut", "Mar", "Kwi", "Maj", "Cze", "Lip", "Sie", "Wrz", "Paź", "Lis", "Gru"],
    "de": ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
}

# Monday-first
WEEKDAYS = {
    "uk": ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Нд"],
    "ru": ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"],
    "en": ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"],
    "pl": ["Pn", "Wt", "Śr", "Cz", "Pt", "So", "Nd"],
    "de": ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"],
}

CALENDAR_SIZES = {
    "small": 0.75,
    "standard": 1,
    "large": 1.3,
}


def _resolve_key(table, key, default, label):
    if key in table:
        return key
    if key is not None:
        log(f"Unknown {label} '{key}', using fallback: {default}")
    return default


def resolve_device(model):
    """Look up a device profile by model name

    Args:
        model (str): Catalog key such as 'iphone_se'

    Returns:
        DeviceProfile: Requested profile, or the iphone_15_pro profile
    """
    name = _resolve_key(MODELS, model, DEFAULT_MODEL, "model")
    width, height = MODELS[name]
    return DeviceProfile(name, width, height)


def resolve_theme(theme):
    """Look up a colour theme by name, falling back to graphite_orange"""
    name = _resolve_key(THEMES, theme, DEFAULT_THEME, "theme")
    return Theme(name, *THEMES[name])


def resolve_locale(lang):
    """Month and weekday abbreviations for a language code, default 'uk'"""
    name = _resolve_key(MONTHS, lang, DEFAULT_LANG, "lang")
    return Locale(name, tuple(MONTHS[name]), tuple(WEEKDAYS[name]))


def resolve_calendar_size(size):
    """Return (size name, scale factor)"""
    name = _resolve_key(CALENDAR_SIZES, size, DEFAULT_CALENDAR_SIZE, "calendar_size")
    return name, CALENDAR_SIZES[name]
