"""
🎨 SUBJECT COLORS
=================
Every subject name always gets the same soft pastel color, so "Mathematics" looks
the same on screen, in Excel, and in the PDF.
"""

import re
from typing import Optional, Tuple


SATURATION = 70
LIGHTNESS = 80
FALLBACK_RGB = (240, 240, 240)

_HSL_RE = re.compile(r"hsl\(\s*(-?\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def color_for(name: str) -> str:
    """
    Hash the name into a hue (0-359) and return "hsl(H, 70%, 80%)".
    Same name -> same color. Two names can still land on the same hue.
    """
    h = 0
    for ch in name:
        h = ord(ch) + (_to_int32(_to_int32(h) << 5) - h)
    hue = h % 360
    return f"hsl({hue}, {SATURATION}%, {LIGHTNESS}%)"


def parse_hsl(text: str) -> Optional[Tuple[int, int, int]]:
    """'hsl(64, 70%, 80%)' -> (64, 70, 80). None if it isn't an hsl() string."""
    if not text:
        return None
    m = _HSL_RE.fullmatch(text.strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(text: str) -> Tuple[int, int, int]:
    """
    CSS hsl() string -> (r, g, b) in 0-255, for exporters that only know RGB.
    Anything unparseable becomes light gray.
    """
    parsed = parse_hsl(text)
    if parsed is None:
        return FALLBACK_RGB
    h = (parsed[0] % 360) / 360
    s = parsed[1] / 100
    l = parsed[2] / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return round(r * 255), round(g * 255), round(b * 255)


def hsl_to_hex(text: str) -> str:
    """CSS hsl() string -> 'RRGGBB' (spreadsheet fill format)."""
    return "%02X%02X%02X" % hsl_to_rgb(text)
