"""End-to-end tests for wallpaper composition and rendering."""

import io

import pytest
from PIL import Image

from yearwall.catalogs import resolve_theme
from yearwall.date_utils import year_progress
from yearwall.layout import Box, Shape, Text, iter_nodes
from yearwall.params import parse_params
from yearwall.styles import Geometry
from yearwall.wallpaper import (
    background_color,
    build_wallpaper_layout,
    footer_text,
    render_wallpaper,
    render_wallpaper_png,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def month_block(root, month):
    return root.children[1].children[month]


def day_nodes(block):
    """Drawable day cells of a month block, skipping placeholders"""
    weeks = block.children[1]
    cells = []
    for row in weeks.children:
        for cell in row.children:
            if isinstance(cell, Shape) and cell.is_empty:
                continue
            cells.append(cell)
    return cells


class TestFooter:
    @pytest.fixture
    def progress(self, fixed_now):
        return year_progress(2, fixed_now)

    @pytest.mark.parametrize(
        "footer,expected",
        [
            ("days_left", "199 днів залишилось"),
            ("days_passed", "167 днів пройдено"),
            ("percent_left", "54% залишилось"),
            ("percent_passed", "46% пройдено"),
            ("days_left_percent_left", "199 днів · 54% залишилось"),
            ("none", ""),
        ],
    )
    def test_templates(self, progress, footer, expected):
        assert footer_text(footer, progress) == expected

    def test_footer_wording_ignores_display_language(self, fixed_now):
        params = parse_params({"lang": "en", "footer": "percent_left"})
        root = build_wallpaper_layout(params, year_progress(params.timezone, fixed_now))
        assert root.children[-1].text == "54% залишилось"

    def test_footer_none_omits_node(self, fixed_now):
        params = parse_params({"footer": "none"})
        root = build_wallpaper_layout(params, year_progress(params.timezone, fixed_now))
        assert len(root.children) == 2


class TestBackground:
    def test_theme_background_without_opacity(self):
        assert background_color(resolve_theme("pure_white"), 0) == "#ffffff"

    def test_opacity_overrides_theme(self):
        for name in ("pure_white", "graphite_orange", "bogus"):
            assert background_color(resolve_theme(name), 50) == (0, 0, 0, 128)

    def test_full_opacity_is_transparent(self):
        assert background_color(resolve_theme("black_white"), 100) == (0, 0, 0, 0)


class TestLayoutTree:
    def test_year_label_and_twelve_months(self, fixed_now, default_params):
        progress = year_progress(default_params.timezone, fixed_now)
        root = build_wallpaper_layout(default_params, progress)

        year = root.children[0]
        assert isinstance(year, Text)
        assert year.text == "2024"
        assert year.opacity == 0.15
        assert len(root.children[1].children) == 12
        assert (root.fixed_width, root.fixed_height) == (1179, 2556)

    def test_month_labels_use_locale(self, fixed_now):
        params = parse_params({"lang": "de"})
        root = build_wallpaper_layout(params, year_progress(params.timezone, fixed_now))
        labels = [month_block(root, m).children[0] for m in range(12)]
        assert labels[2].text == "Mär"
        assert labels[2].display_text == "MÄR"

    def test_current_month_label_is_highlighted(self, fixed_now, default_params):
        root = build_wallpaper_layout(
            default_params, year_progress(default_params.timezone, fixed_now)
        )
        june = month_block(root, 5).children[0]
        may = month_block(root, 4).children[0]
        assert june.color == default_params.theme.today
        assert june.opacity == 1.0
        assert may.color == default_params.theme.text
        assert may.opacity == 0.4

    def test_exactly_one_today_cell(self, fixed_now, default_params):
        root = build_wallpaper_layout(
            default_params, year_progress(default_params.timezone, fixed_now)
        )
        shapes = [n for n in iter_nodes(root) if isinstance(n, Shape) and not n.is_empty]
        assert len(shapes) == 366
        scaled = [s for s in shapes if s.scale_x > 1]
        assert len(scaled) == 1
        assert scaled[0] is day_nodes(month_block(root, 5))[14]

    def test_future_saturday_distinct_in_all_mode(self, fixed_now):
        params = parse_params({"style": "numbers", "weekend_mode": "all"})
        root = build_wallpaper_layout(params, year_progress(params.timezone, fixed_now))
        june = day_nodes(month_block(root, 5))

        saturday = june[21].children[0]  # 22 June 2024
        wednesday = june[18].children[0]  # 19 June 2024
        assert saturday.text == "22"
        assert saturday.color == "#2a2a2aaa"
        assert wednesday.color == "#2a2a2a"

    def test_past_weekend_uses_translucent_today_colour(self, fixed_now, default_params):
        root = build_wallpaper_layout(
            default_params, year_progress(default_params.timezone, fixed_now)
        )
        june = day_nodes(month_block(root, 5))
        assert june[8].fill == "#ff8c4266"  # Sunday 9 June
        assert june[9].fill == "#ff8c4299"  # Monday 10 June

    def test_large_calendar_scales_cells(self, fixed_now):
        standard = parse_params({"style": "squares"})
        large = parse_params({"style": "squares", "calendar_size": "large"})
        progress = year_progress(2, fixed_now)

        small_cell = day_nodes(month_block(build_wallpaper_layout(standard, progress), 0))[0]
        large_cell = day_nodes(month_block(build_wallpaper_layout(large, progress), 0))[0]
        assert small_cell.width == Geometry(1179, 1).dot_size
        assert large_cell.width == Geometry(1179, 1.3).dot_size


class TestRender:
    def test_example_iphone_se_render(self, fixed_now):
        params = parse_params(
            {
                "model": "iphone_se",
                "style": "squares",
                "theme": "pure_white",
                "lang": "en",
                "footer": "percent_left",
                "timezone": "0",
            }
        )
        image = render_wallpaper(params, fixed_now)

        assert image.size == (750, 1334)
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (255, 255, 255)
        assert image.getpixel((749, 1333)) == (255, 255, 255)

    def test_unknown_model_renders_default_size(self, fixed_now):
        image = render_wallpaper(parse_params({"model": "bogus"}), fixed_now)
        assert image.size == (1179, 2556)
        assert image.getpixel((0, 0)) == (0x11, 0x11, 0x11)

    def test_opacity_renders_translucent_black(self, fixed_now):
        params = parse_params({"model": "iphone_se", "theme": "pure_white", "opacity": "50"})
        image = render_wallpaper(params, fixed_now)

        assert image.mode == "RGBA"
        assert image.getpixel((0, 0)) == (0, 0, 0, 128)

    @pytest.mark.parametrize(
        "style",
        ["dots", "dots_mini", "numbers", "numbers_bold", "squares", "squares_rounded",
         "lines", "bars"],
    )
    def test_every_style_draws_something(self, fixed_now, style):
        params = parse_params({"model": "iphone_se", "style": style})
        image = render_wallpaper(params, fixed_now)
        colours = image.getcolors(maxcolors=1_000_000)
        assert len(colours) > 2

    def test_png_bytes(self, fixed_now):
        data = render_wallpaper_png(parse_params({"model": "iphone_se"}), fixed_now)
        assert data.startswith(PNG_SIGNATURE)
        assert Image.open(io.BytesIO(data)).size == (750, 1334)

    def test_renders_are_independent(self, fixed_now):
        params = parse_params({"model": "iphone_se", "style": "numbers"})
        first = render_wallpaper_png(params, fixed_now)
        second = render_wallpaper_png(params, fixed_now)
        assert first == second


def test_layout_fits_inside_the_screen(fixed_now):
    from yearwall.image_renderer import WallpaperImageRenderer

    params = parse_params({"model": "iphone_se", "calendar_size": "large"})
    renderer = WallpaperImageRenderer(750, 1334)
    root = renderer.layout(build_wallpaper_layout(params, year_progress(2, fixed_now)))

    for node in iter_nodes(root):
        if isinstance(node, (Shape, Box)) and node is not root:
            assert 0 <= node.x and node.x + node.width <= 750
