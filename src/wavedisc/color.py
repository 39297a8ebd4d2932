"""Color parsing and derivation."""
import colorsys


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip('#')
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: #{hex_color}")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB to hex color."""
    return f'#{r:02x}{g:02x}{b:02x}'


def to_rgba(color) -> tuple[int, int, int, int]:
    """Normalize a hex string or RGB(A) tuple to an RGBA tuple."""
    if isinstance(color, str):
        return (*hex_to_rgb(color), 255)
    if len(color) == 3:
        return (int(color[0]), int(color[1]), int(color[2]), 255)
    if len(color) == 4:
        return tuple(int(c) for c in color)
    raise ValueError(f"Invalid color: {color!r}")


def highlighted(color, brightness_adjustment: float = 0.25) -> tuple[int, int, int, int]:
    """
    Brighten a color by scaling its lightness.

    Lightness is multiplied by (1 + brightness_adjustment) and capped at 1,
    so pure red (lightness 0.5) with an adjustment of 0.5 becomes a pink
    rather than staying saturated red. Hue, saturation and alpha are kept.
    """
    r, g, b, a = to_rgba(color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    l = min(1.0, l * (1 + brightness_adjustment))
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (round(r * 255), round(g * 255), round(b * 255), a)
