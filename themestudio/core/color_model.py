"""Color conversions between hex, RGB and HSV.

Hex (``#rrggbb``, lowercase) is the canonical representation. RGB and HSV
values only exist while the color picker is being edited. None of the
functions here raise on bad text: callers get ``None`` back and keep the last
valid value, so partially typed input never interrupts editing.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]{6}$")
_FUNC_RGB_RE = re.compile(r"^rgba?\((.+)\)$", re.IGNORECASE)
_CHANNEL_SPLIT_RE = re.compile(r"[,/ ]+")
_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True, slots=True)
class RGB:
    """Red/green/blue channels in the 0-255 range."""

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class HSV:
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""

    h: float
    s: float
    v: float


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def finite_or_zero(value: float) -> float:
    """Map NaN and infinities to 0."""
    return value if math.isfinite(value) else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def normalize_hex(value: str | None) -> str | None:
    """Return the canonical ``#rrggbb`` form of a hex color, or None."""
    if not value:
        return None
    text = value.strip()
    if text.startswith("#"):
        text = text[1:]
    if len(text) == 3:
        text = "".join(char * 2 for char in text)
    if not _HEX_DIGITS_RE.match(text):
        return None
    return f"#{text.lower()}"


def parse_color(value: str | None) -> RGB | None:
    """Parse hex or ``rgb()``/``rgba()`` text into channels.

    Functional notation accepts integer or percentage channels. A channel that
    is not a number counts as 0; fewer than three channels is a failure.
    """
    normalized = normalize_hex(value)
    if normalized:
        raw = normalized[1:]
        return RGB(
            r=int(raw[0:2], 16),
            g=int(raw[2:4], 16),
            b=int(raw[4:6], 16),
        )
    if not value:
        return None
    match = _FUNC_RGB_RE.match(value.strip())
    if not match:
        return None
    parts = [part for part in _CHANNEL_SPLIT_RE.split(match.group(1)) if part]
    if len(parts) < 3:
        return None
    r, g, b = (_parse_channel(part) for part in parts[:3])
    return RGB(r=r, g=g, b=b)


def _parse_channel(token: str) -> int:
    text = token.strip()
    number = _NUMBER_PREFIX_RE.match(text)
    if number is None:
        return 0
    numeric = float(number.group(0))
    if text.endswith("%"):
        numeric = numeric / 100 * 255
    return round_half_up(clamp(numeric, 0, 255))


def to_hex(rgb: RGB) -> str:
    """Format channels as canonical hex, rounding and clamping each one."""
    channels = (rgb.r, rgb.g, rgb.b)
    return "#" + "".join(
        f"{round_half_up(clamp(finite_or_zero(channel), 0, 255)):02x}" for channel in channels
    )


def to_hsv(rgb: RGB) -> HSV:
    r1 = clamp(finite_or_zero(rgb.r), 0, 255) / 255
    g1 = clamp(finite_or_zero(rgb.g), 0, 255) / 255
    b1 = clamp(finite_or_zero(rgb.b), 0, 255) / 255
    high = max(r1, g1, b1)
    low = min(r1, g1, b1)
    delta = high - low

    hue = 0.0
    if delta != 0:
        if high == r1:
            hue = ((g1 - b1) / delta) % 6
        elif high == g1:
            hue = (b1 - r1) / delta + 2
        else:
            hue = (r1 - g1) / delta + 4
        hue *= 60
        if hue < 0:
            hue += 360
        if hue >= 360:
            hue -= 360

    saturation = 0.0 if high == 0 else delta / high
    return HSV(h=hue, s=saturation, v=high)


def from_hsv(hsv: HSV) -> RGB:
    hue = finite_or_zero(hsv.h) % 360
    saturation = clamp(finite_or_zero(hsv.s), 0, 1)
    value = clamp(finite_or_zero(hsv.v), 0, 1)

    chroma = value * saturation
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    m = value - chroma

    if hue < 60:
        r1, g1, b1 = chroma, x, 0.0
    elif hue < 120:
        r1, g1, b1 = x, chroma, 0.0
    elif hue < 180:
        r1, g1, b1 = 0.0, chroma, x
    elif hue < 240:
        r1, g1, b1 = 0.0, x, chroma
    elif hue < 300:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return RGB(
        r=round_half_up((r1 + m) * 255),
        g=round_half_up((g1 + m) * 255),
        b=round_half_up((b1 + m) * 255),
    )

