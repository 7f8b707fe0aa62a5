"""Generate the picker's calendar glyph (PIL Image, in-memory)."""

from PIL import Image, ImageDraw


def create_icon_image(size: int = 20, color: str = "#64748B") -> Image.Image:
    """Return a size×size RGBA calendar outline on a transparent background."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    width = max(1, size // 12)
    top = size * 5 // 24
    left, right = size // 8, size - size // 8 - 1
    bottom = size - size // 8 - 1

    # Page
    draw.rounded_rectangle(
        (left, top, right, bottom), radius=max(1, size // 10),
        outline=color, width=width,
    )
    # Binding rings
    for x in (size // 3, size - size // 3 - 1):
        draw.line((x, size // 8, x, top + size // 8), fill=color, width=width)
    # Header rule
    rule_y = top + (bottom - top) // 3
    draw.line((left + width, rule_y, right - width, rule_y), fill=color, width=width)

    return img
