"""
Layout tree and a small flex-box style layout engine

The wallpaper is described as nested nodes:

- Box: a flex container stacking children in a row or column, optionally
  wrapping rows onto several centered lines
- Shape: a fixed size rectangle or circle
- Text: a single line of text measured by the renderer

LayoutEngine.layout() measures the tree bottom-up and then assigns absolute
positions top-down. Painting is left to the image renderer.
"""

ROW = "row"
COLUMN = "column"

START = "flex-start"
CENTER = "center"


class Node:
    """Base layout node with vertical margins and a computed box"""

    def __init__(self, margin_top=0, margin_bottom=0):
        self.margin_top = margin_top
        self.margin_bottom = margin_bottom

        # Filled in by LayoutEngine
        self.x = 0
        self.y = 0
        self.width = 0
        self.height = 0

    @property
    def outer_height(self):
        return self.height + self.margin_top + self.margin_bottom

    @property
    def children(self):
        return []


class Box(Node):
    def __init__(
        self,
        children=None,
        direction=COLUMN,
        gap=0,
        wrap=False,
        align=CENTER,
        justify=START,
        padding_x=0,
        width=None,
        height=None,
        background=None,
        circle=False,
        margin_top=0,
        margin_bottom=0,
    ):
        """
        Flex container.

        Args:
            children (list): Child nodes in paint order
            direction (str): ROW or COLUMN main axis
            gap (int): Space between children and between wrapped lines
            wrap (bool): Break a row onto several lines when it overflows
            align (str): Cross-axis alignment, START or CENTER
            justify (str): Main-axis alignment, START or CENTER
            padding_x (int): Left and right inner padding
            width (int, optional): Fixed width, otherwise fit to content
            height (int, optional): Fixed height, otherwise fit to content
            background: Colour filling the box, or None
            circle (bool): Paint the background as an ellipse
        """
        super().__init__(margin_top, margin_bottom)
        self._children = list(children or [])
        self.direction = direction
        self.gap = gap
        self.wrap = wrap
        self.align = align
        self.justify = justify
        self.padding_x = padding_x
        self.fixed_width = width
        self.fixed_height = height
        self.background = background
        self.circle = circle
        self.lines = []

    @property
    def children(self):
        return self._children


class Shape(Node):
    def __init__(
        self,
        width,
        height,
        fill=None,
        border=None,
        radius=0,
        circle=False,
        scale_x=1.0,
        scale_y=1.0,
        margin_top=0,
        margin_bottom=0,
    ):
        """
        Fixed size rectangle or circle.

        Scale factors enlarge the painted shape around its center without
        affecting layout. A shape with neither fill nor border is an empty
        placeholder.
        """
        super().__init__(margin_top, margin_bottom)
        self.width = width
        self.height = height
        self.fill = fill
        self.border = border
        self.radius = radius
        self.circle = circle
        self.scale_x = scale_x
        self.scale_y = scale_y

    @property
    def is_empty(self):
        return self.fill is None and self.border is None


class Text(Node):
    def __init__(
        self,
        text,
        font_size,
        color,
        weight=400,
        opacity=1.0,
        letter_spacing=0.0,
        uppercase=False,
        margin_top=0,
        margin_bottom=0,
    ):
        """
        Single line of text.

        Args:
            letter_spacing (float): Extra space after each character, in em
        """
        super().__init__(margin_top, margin_bottom)
        self.text = text
        self.font_size = font_size
        self.color = color
        self.weight = weight
        self.opacity = opacity
        self.letter_spacing = letter_spacing
        self.uppercase = uppercase

    @property
    def display_text(self):
        return self.text.upper() if self.uppercase else self.text

    @property
    def bold(self):
        return self.weight >= 600

    @property
    def spacing_px(self):
        return self.letter_spacing * self.font_size


class LayoutEngine:
    """Assigns sizes and absolute positions to a layout tree"""

    def __init__(self, measure_text):
        """
        Args:
            measure_text (callable): Text node -> (width, height) in pixels
        """
        self.measure_text = measure_text

    def layout(self, root, available_width=None):
        """Measure and position the tree with its top-left corner at (0, 0)

        Returns:
            Node: The same root, now carrying positions
        """
        self._measure(root, available_width)
        self._place(root, 0, 0)
        return root

    def _measure(self, node, available):
        if isinstance(node, Text):
            node.width, node.height = self.measure_text(node)
            return
        if not isinstance(node, Box):
            return

        outer = node.fixed_width if node.fixed_width is not None else available
        inner = None if outer is None else max(0, outer - 2 * node.padding_x)

        for child in node.children:
            self._measure(child, inner)

        if node.direction == COLUMN:
            content_width = max((c.width for c in node.children), default=0)
            content_height = _stack(node.children, node.gap)
        else:
            if node.wrap and inner is not None:
                node.lines = _break_lines(node.children, node.gap, inner)
            else:
                node.lines = [node.children] if node.children else []
            line_widths = [_line_width(line, node.gap) for line in node.lines]
            content_width = max(line_widths, default=0)
            if len(node.lines) > 1:
                content_width = inner
            content_height = sum(_line_height(line) for line in node.lines)
            content_height += node.gap * max(0, len(node.lines) - 1)

        node.width = (
            node.fixed_width
            if node.fixed_width is not None
            else content_width + 2 * node.padding_x
        )
        node.height = node.fixed_height if node.fixed_height is not None else content_height

    def _place(self, node, x, y):
        node.x = x
        node.y = y
        if not isinstance(node, Box):
            return

        inner_x = x + node.padding_x
        inner_width = node.width - 2 * node.padding_x

        if node.direction == COLUMN:
            cursor = y
            if node.justify == CENTER:
                cursor += (node.height - _stack(node.children, node.gap)) / 2
            for child in node.children:
                child_x = inner_x + _cross_offset(node.align, inner_width, child.width)
                self._place(child, child_x, cursor + child.margin_top)
                cursor += child.outer_height + node.gap
            return

        line_y = y
        for line in node.lines:
            line_height = _line_height(line)
            cursor = inner_x
            if node.justify == CENTER:
                cursor += (inner_width - _line_width(line, node.gap)) / 2
            for child in line:
                child_y = line_y + _cross_offset(node.align, line_height, child.outer_height)
                self._place(child, cursor, child_y + child.margin_top)
                cursor += child.width + node.gap
            line_y += line_height + node.gap


def _stack(children, gap):
    if not children:
        return 0
    return sum(c.outer_height for c in children) + gap * (len(children) - 1)


def _line_width(line, gap):
    if not line:
        return 0
    return sum(c.width for c in line) + gap * (len(line) - 1)


def _line_height(line):
    return max((c.outer_height for c in line), default=0)


def _cross_offset(align, space, size):
    if align == CENTER:
        return (space - size) / 2
    return 0


def _break_lines(children, gap, max_width):
    """Greedy line breaking; an item wider than max_width gets its own line"""
    lines = []
    current = []
    width = 0
    for child in children:
        needed = child.width if not current else width + gap + child.width
        if current and needed > max_width:
            lines.append(current)
            current = [child]
            width = child.width
        else:
            current.append(child)
            width = needed
    if current:
        lines.append(current)
    return lines


def iter_nodes(node):
    """Depth-first walk in paint order (parents before children)"""
    yield node
    for child in node.children:
        yield from iter_nodes(child)
