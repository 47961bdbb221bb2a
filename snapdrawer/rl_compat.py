"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
import ctypes
from typing import Any, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


class _CTypesRect(ctypes.Structure):
    """Fallback Rectangle structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("width", ctypes.c_float),
        ("height", ctypes.c_float),
    ]


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'Rectangle'):
        try:
            return rl.Rectangle(x, y, w, h)
        except TypeError:
            pass
    if hasattr(rl, 'ffi'):
        r = rl.ffi.new("Rectangle *")
        r[0].x = float(x)
        r[0].y = float(y)
        r[0].width = float(w)
        r[0].height = float(h)
        return r[0]
    return _CTypesRect(float(x), float(y), float(w), float(h))


def make_color(rgba: Tuple[int, int, int, int]) -> Any:
    """Create a raylib Color from an (r, g, b, a) tuple."""
    r, g, b, a = (int(c) for c in rgba)
    ctor = getattr(rl, "Color", None)
    if ctor:
        try:
            return ctor(r, g, b, a)
        except TypeError:
            pass
    if hasattr(rl, 'ffi'):
        c = rl.ffi.new("Color *")
        c[0].r, c[0].g, c[0].b, c[0].a = r, g, b, a
        return c[0]
    return rl.BLACK


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(text, x, y, size, color)
    except TypeError:
        rl.DrawText(text.encode('utf-8'), x, y, size, color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding fallback."""
    try:
        return rl.MeasureText(text, size)
    except TypeError:
        return rl.MeasureText(text.encode('utf-8'), size)


def init_window(w: int, h: int, title: str) -> None:
    """Open the window with encoding fallback for the title."""
    try:
        rl.InitWindow(w, h, title)
    except TypeError:
        rl.InitWindow(w, h, title.encode('utf-8'))


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_color',
    'draw_text',
    'measure_text',
    'init_window',
]
