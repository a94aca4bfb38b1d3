# drawutils.py - some utilities to aid with clock-drawing
import cairo

# init_canvas - initialize a cairo canvas
# The canvas is of size (w, h) in pixels, with the origin in the top
# left corner and y growing downward, and is optionally cleared to
# the given (r, g, b) color.
def init_canvas(w, h, clearcolor = None):
    surf = cairo.ImageSurface(cairo.FORMAT_RGB24, w, h)

    if clearcolor:
        ctx = cairo.Context(surf)
        ctx.rectangle(0, 0, w, h)
        ctx.set_source_rgb(*clearcolor)
        ctx.fill()
        surf.flush()

    return surf
