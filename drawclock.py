#!/usr/bin/python3
# drawclock.py - draw the current time as an analog clock into a PNG,
# once per second.
#
# usage: drawclock.py [output.png] [ticks]
import logging, sys

import clockconfig as cfg
from clock import ClockRenderer
from drawutils import init_canvas
from ticker import Ticker

logger = logging.getLogger("drawclock")

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    output = argv[0] if len(argv) > 0 else cfg.OUTPUT_PATH
    ticks = int(argv[1]) if len(argv) > 1 else None

    logging.basicConfig(
        level=getattr(logging, cfg.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    surf = init_canvas(cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT, cfg.CANVAS_CLEAR_COLOR)
    renderer = ClockRenderer(surf, cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT)

    def frame():
        renderer.tick()
        surf.write_to_png(output)

    ticker = Ticker(frame, cfg.TICK_INTERVAL, max_ticks=ticks)
    logger.info("Drawing clock to %s", output)
    try:
        ticker.run()
    except KeyboardInterrupt:
        ticker.stop()
        logger.info("Stopped at %s", renderer.time)
    return ticker.ticks

if __name__ == "__main__":
    main()
