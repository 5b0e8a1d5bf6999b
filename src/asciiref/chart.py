import math
from collections.abc import Collection, Sequence

from PIL import Image, ImageDraw, ImageFont

from asciiref.model import CharacterRecord

PADDING = 4
BACKGROUND = 255
INK = 0
GRID = 160


def load_font(font_path: str | None, font_size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a TrueType font, or Pillow's bundled default when no path is given."""
    if font_path is None:
        return ImageFont.load_default(font_size)
    return ImageFont.truetype(font_path, font_size)


def cell_label(record: CharacterRecord) -> str:
    return f"{record.code:02X} {record.glyph}"


def cell_origin(index: int, rows: int, cell_width: int, cell_height: int) -> tuple[int, int]:
    """Top-left pixel of the cell at ``index``; cells run down each column first."""
    col, row = divmod(index, rows)
    return col * cell_width, row * cell_height


def render_chart(
    records: Sequence[CharacterRecord],
    font_path: str | None = None,
    font_size: int = 14,
    columns: int = 8,
    highlight: Collection[int] = (),
) -> tuple[Image.Image, int, int]:
    """Draw the records as a grid of ``HH glyph`` cells, like a printed ASCII chart.

    Codes in ``highlight`` are drawn inverted.

    Returns:
        image: greyscale chart
        cell_width: pixel width of one cell
        cell_height: pixel height of one cell
    """
    if columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")

    font = load_font(font_path, font_size)
    labels = [cell_label(record) for record in records]

    # Tall ascender and descender so every glyph fits the same cell
    bbox = font.getbbox("Mgy|")
    text_height = bbox[3] - bbox[1]
    y_offset = -bbox[1]
    widest = max((font.getlength(label) for label in labels), default=0)

    cell_width = math.ceil(widest) + 2 * PADDING
    cell_height = text_height + 2 * PADDING
    rows = max(1, math.ceil(len(records) / columns))

    image = Image.new("L", (columns * cell_width, rows * cell_height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    for index, (record, label) in enumerate(zip(records, labels)):
        x, y = cell_origin(index, rows, cell_width, cell_height)
        box = (x, y, x + cell_width - 1, y + cell_height - 1)
        if record.code in highlight:
            draw.rectangle(box, fill=INK, outline=GRID)
            fill = BACKGROUND
        else:
            draw.rectangle(box, outline=GRID)
            fill = INK
        draw.text((x + PADDING, y + PADDING + y_offset), label, fill=fill, font=font)

    return image, cell_width, cell_height
