# clock.py: draw an analog clock on a cairo context.

import logging
import math
from datetime import datetime

import cairo

import clockconfig as cfg

logger = logging.getLogger(__name__)

# clock_angles - angles of the hour, minute and second arrows
# Angles are in degrees, 0 is 12 o'clock and they grow clockwise.
# returns (hour_angle, minute_angle, second_angle)
def clock_angles(hours, minutes, seconds):
    minute_angle = minutes * 6
    second_angle = seconds * 6
    hour_angle = hours % 12 * 30 + minutes * 0.5
    return (hour_angle, minute_angle, second_angle)

# angles_for - clock_angles for a datetime
def angles_for(now):
    return clock_angles(now.hour, now.minute, now.second)

# angle_between - the smaller angle between two arrows, in degrees
def angle_between(a, b):
    angle = abs(b - a)
    return min(angle, 360 - angle)

# to_radians - convert a clock angle to a cairo arc angle
# cairo measures from 3 o'clock, the clock from 12 o'clock.
def to_radians(degrees):
    return degrees * (math.pi / 180) - math.pi / 2


# ClockRenderer - paints the clock on a cairo surface of size (width, height)
# now is called once per tick and must return a datetime.
class ClockRenderer:
    def __init__(self, surface, width, height, now=datetime.now):
        self.surface = surface
        self.x_center = width / 2
        self.y_center = height / 2
        self.time = "00:00:00"
        self.now = now

    # tick - sample the time and paint one frame
    # returns the (hour, minute, second) angles that were drawn
    def tick(self):
        now = self.now()
        self.time = now.strftime("%H:%M:%S")
        angles = angles_for(now)
        logger.debug("Drawing %s (hour=%s, minute=%s, second=%s, span=%s)",
                     self.time, *angles, angle_between(angles[0], angles[1]))
        ctx = cairo.Context(self.surface)
        self.draw_frame(ctx, angles)
        self.surface.flush()
        return angles

    # draw_frame - paint the face, marks and arrows for (hour, minute, second)
    def draw_frame(self, ctx, angles):
        (hour, minute, second) = angles

        self.draw_disk(ctx, cfg.FACE_COLOR, cfg.FACE_RADIUS)
        self.draw_span(ctx, hour, minute, cfg.SPAN_RADIUS, cfg.SPAN_COLOR)
        self.draw_stamps(ctx, cfg.STAMP_RADIUS, cfg.STAMP_WIDTH, cfg.STAMP_COLOR)

        # shadows go first so the arrows cover them
        self.draw_arrow(ctx, minute + cfg.SHADOW_SHIFT, cfg.MINUTE_LENGTH,
                        cfg.MINUTE_WIDTH, cfg.SHADOW_COLOR)
        self.draw_arrow(ctx, hour + cfg.SHADOW_SHIFT, cfg.HOUR_LENGTH,
                        cfg.HOUR_WIDTH, cfg.SHADOW_COLOR)

        self.draw_arrow(ctx, minute, cfg.MINUTE_LENGTH, cfg.MINUTE_WIDTH,
                        cfg.ARROW_COLOR)
        self.draw_arrow(ctx, hour, cfg.HOUR_LENGTH, cfg.HOUR_WIDTH,
                        cfg.ARROW_COLOR)
        self.draw_arrow(ctx, second, cfg.SECOND_LENGTH, cfg.SECOND_WIDTH,
                        cfg.SECOND_COLOR)

        self.draw_disk(ctx, cfg.CAP_COLOR, cfg.CAP_RADIUS)

    # draw_disk - filled circle around the center, used for face and cap
    def draw_disk(self, ctx, color, radius):
        ctx.new_path()
        ctx.set_source_rgb(*color)
        ctx.arc(self.x_center, self.y_center, radius, 0, 2*math.pi)
        ctx.fill()

    # draw_span - arc from arrow a to arrow b, with a shadow below it
    def draw_span(self, ctx, a, b, radius, color):
        start = to_radians(a)
        end = to_radians(b)
        for (dy, c) in ((cfg.SPAN_SHADOW_OFFSET, cfg.SHADOW_COLOR), (0, color)):
            ctx.new_path()
            ctx.set_source_rgb(*c)
            ctx.set_line_width(cfg.SPAN_WIDTH)
            ctx.arc(self.x_center, self.y_center + dy, radius, start, end)
            ctx.stroke()

    # draw_stamps - short arcs marking 12, 3, 6 and 9 o'clock
    def draw_stamps(self, ctx, radius, width, color):
        for (start, end) in cfg.STAMPS:
            ctx.new_path()
            ctx.set_source_rgb(*color)
            ctx.set_line_width(width)
            ctx.arc(self.x_center, self.y_center, radius, start, end)
            ctx.stroke()

    # arrow_tip - point at distance length from the center along angle
    def arrow_tip(self, angle, length):
        theta = math.pi / 2 - angle * (math.pi / 180)
        return (self.x_center + length * math.cos(theta),
                self.y_center - length * math.sin(theta))

    # draw_arrow - two strokes from beside the pivot out to the tip and back
    def draw_arrow(self, ctx, angle, length, width, color):
        base = cfg.ARROW_BASE
        ctx.new_path()
        ctx.set_source_rgb(*color)
        ctx.set_line_width(width)
        ctx.move_to(self.x_center - base, self.y_center - base)
        ctx.line_to(*self.arrow_tip(angle, length))
        ctx.line_to(self.x_center + base, self.y_center + base)
        ctx.stroke()
        ctx.close_path()
