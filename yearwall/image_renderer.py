"""
Wallpaper Image Renderer Module

Paints an arranged layout tree onto a PIL image and encodes it as PNG.
Every drawable is rendered into an alpha mask and composited, so translucent
theme colours (#rrggbbaa) blend with whatever is underneath them.
"""

import io
import math

from PIL import Image, ImageColor, ImageDraw, ImageFont

from yearwall import config
from yearwall.layout import Box, LayoutEngine, Shape, Text, iter_nodes
from yearwall.logger import log

# Shapes are drawn at this multiple and downsampled for smooth edges
SUPERSAMPLE = 4

# Looked up in the system font directories when no font path is configured
REGULAR_FONTS = ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf")
BOLD_FONTS = ("DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf", "Arial Bold.ttf")


def parse_color(color):
    """'#rrggbb', '#rrggbbaa' or an RGB(A) tuple -> RGBA tuple"""
    if isinstance(color, tuple):
        return color if len(color) == 4 else color + (255,)
    return ImageColor.getcolor(color, "RGBA")


class WallpaperImageRenderer:
    def __init__(self, width, height, font_path=None, bold_font_path=None):
        """
        Initialize the wallpaper renderer.

        Args:
            width (int): Image width in pixels
            height (int): Image height in pixels
            font_path (str): Path to a regular TTF font, optional
            bold_font_path (str): Path to a bold TTF font, optional
        """
        self.width = width
        self.height = height
        self.font_path = font_path if font_path is not None else config.FONT_PATH
        self.bold_font_path = (
            bold_font_path if bold_font_path is not None else config.BOLD_FONT_PATH
        )
        self._fonts = {}

    def _get_font(self, size, bold=False):
        """Get font object, fallback to system and then default font"""
        key = (size, bold)
        if key in self._fonts:
            return self._fonts[key]

        configured = self.bold_font_path if bold else self.font_path
        candidates = ([configured] if configured else []) + list(
            BOLD_FONTS if bold else REGULAR_FONTS
        )

        font = None
        for candidate in candidates:
            try:
                font = ImageFont.truetype(candidate, size)
                break
            except OSError:
                continue

        if font is None:
            log(f"No TrueType font found, using Pillow default font at {size}px")
            font = ImageFont.load_default(size=size)

        self._fonts[key] = font
        return font

    def measure_text(self, node):
        """Width and height of a Text node including letter spacing"""
        font = self._get_font(node.font_size, node.bold)
        spacing = node.spacing_px
        width = sum(font.getlength(ch) + spacing for ch in node.display_text)
        height = font.getbbox("Ay")[3]
        return math.ceil(width), height

    def layout(self, root):
        """Measure and position a layout tree for this canvas"""
        return LayoutEngine(self.measure_text).layout(root, self.width)

    def render(self, root, background):
        """
        Paint a laid-out tree.

        Args:
            root (Node): Tree already positioned by layout()
            background: Canvas colour, hex string or RGBA tuple

        Returns:
            PIL.Image: RGB image when the result is opaque, RGBA otherwise
        """
        canvas = Image.new("RGBA", (self.width, self.height), parse_color(background))

        for node in iter_nodes(root):
            if isinstance(node, Box):
                if node.background is not None:
                    self._paint_rect(
                        canvas, node.x, node.y, node.width, node.height,
                        fill=node.background, circle=node.circle,
                    )
            elif isinstance(node, Shape):
                self._paint_shape(canvas, node)
            elif isinstance(node, Text):
                self._paint_text(canvas, node)

        if canvas.getextrema()[3] == (255, 255):
            return canvas.convert("RGB")
        return canvas

    def _paint_shape(self, canvas, node):
        if node.is_empty:
            return
        width = node.width * node.scale_x
        height = node.height * node.scale_y
        x = node.x + (node.width - width) / 2
        y = node.y + (node.height - height) / 2
        self._paint_rect(
            canvas, x, y, width, height,
            fill=node.fill, border=node.border, radius=node.radius, circle=node.circle,
        )

    def _paint_rect(self, canvas, x, y, width, height, fill=None, border=None,
                    radius=0, circle=False):
        tile_w = max(1, round(width))
        tile_h = max(1, round(height))
        left = round(x)
        top = round(y)

        if fill is not None:
            mask = _shape_mask(tile_w, tile_h, radius, circle, outline=False)
            _composite_mask(canvas, mask, fill, left, top)
        if border is not None:
            mask = _shape_mask(tile_w, tile_h, radius, circle, outline=True)
            _composite_mask(canvas, mask, border, left, top)

    def _paint_text(self, canvas, node):
        font = self._get_font(node.font_size, node.bold)
        mask = Image.new("L", (max(1, node.width), max(1, node.height)), 0)
        draw = ImageDraw.Draw(mask)

        cursor = 0.0
        for ch in node.display_text:
            draw.text((cursor, 0), ch, font=font, fill=255)
            cursor += font.getlength(ch) + node.spacing_px

        _composite_mask(canvas, mask, node.color, round(node.x), round(node.y), node.opacity)


def _shape_mask(width, height, radius, circle, outline):
    """Anti-aliased coverage mask of a filled or 1px outlined shape"""
    big = Image.new("L", (width * SUPERSAMPLE, height * SUPERSAMPLE), 0)
    draw = ImageDraw.Draw(big)
    box = (0, 0, big.width - 1, big.height - 1)
    fill = None if outline else 255
    line = 255 if outline else None
    line_width = SUPERSAMPLE if outline else 0

    if circle:
        draw.ellipse(box, fill=fill, outline=line, width=line_width)
    elif radius > 0:
        corner = min(radius * SUPERSAMPLE, min(big.width, big.height) // 2)
        draw.rounded_rectangle(box, radius=corner, fill=fill, outline=line, width=line_width)
    else:
        draw.rectangle(box, fill=fill, outline=line, width=line_width)

    return big.resize((width, height), Image.Resampling.LANCZOS)


def _composite_mask(canvas, mask, color, x, y, opacity=1.0):
    """Blend a solid colour through a coverage mask at (x, y), clipped to the canvas"""
    r, g, b, a = parse_color(color)
    alpha = a * opacity
    if alpha <= 0:
        return
    if alpha < 255:
        mask = mask.point(lambda v: round(v * alpha / 255))

    tile = Image.new("RGBA", mask.size, (r, g, b, 255))
    tile.putalpha(mask)

    left = max(0, x)
    top = max(0, y)
    right = min(canvas.width, x + tile.width)
    bottom = min(canvas.height, y + tile.height)
    if right <= left or bottom <= top:
        return
    if (left, top, right, bottom) != (x, y, x + tile.width, y + tile.height):
        tile = tile.crop((left - x, top - y, right - x, bottom - y))
    canvas.alpha_composite(tile, dest=(left, top))


def to_png_bytes(image):
    """Encode a PIL image as PNG bytes"""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
