"""Shared fixtures for the clock tests."""

import struct

import pytest


class RecordingContext:
    """Stand-in for a cairo context that remembers every painted shape.

    Each ``stroke()`` or ``fill()`` appends a dict with the kind of paint,
    the source color, the line width and the path calls made since the
    last ``new_path()``.
    """

    def __init__(self):
        self.calls = []
        self.shapes = []
        self._path = []
        self._color = None
        self._width = None

    def new_path(self):
        self.calls.append(("new_path",))
        self._path = []

    def set_source_rgb(self, r, g, b):
        self.calls.append(("set_source_rgb", r, g, b))
        self._color = (r, g, b)

    def set_line_width(self, width):
        self.calls.append(("set_line_width", width))
        self._width = width

    def arc(self, *args):
        self.calls.append(("arc",) + args)
        self._path.append(("arc",) + args)

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))
        self._path.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))
        self._path.append(("line_to", x, y))

    def close_path(self):
        self.calls.append(("close_path",))

    def _paint(self, kind):
        self.calls.append((kind,))
        self.shapes.append({
            "kind": kind,
            "color": self._color,
            "width": self._width,
            "path": list(self._path),
        })
        self._path = []

    def stroke(self):
        self._paint("stroke")

    def fill(self):
        self._paint("fill")


@pytest.fixture
def recording_ctx():
    return RecordingContext()


def read_pixel(surface, x, y):
    """Return the (r, g, b) bytes of one pixel of an RGB24/ARGB32 surface."""
    surface.flush()
    data = surface.get_data()
    (value,) = struct.unpack_from("=I", data, y * surface.get_stride() + x * 4)
    return ((value >> 16) & 0xff, (value >> 8) & 0xff, value & 0xff)


@pytest.fixture
def pixel():
    return read_pixel
