"""Colour helpers for the start-up screen."""

import math


def lerp(a, b, t):
    """Linearly interpolate between ``a`` and ``b`` by ``t``."""
    return a + (b - a) * t


def rainbow_color(time):
    """Return an (r, g, b) tuple of bytes cycling through the rainbow over ``time``."""

    def channel(phase):
        return int((math.sin(time + phase) * 0.5 + 0.5) * 255)

    return channel(0.0), channel(2.0), channel(4.0)