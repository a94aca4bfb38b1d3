# ticker.py - run a callback once per interval until stopped.

import logging
import threading

logger = logging.getLogger(__name__)


# Ticker - calls callback, waits interval seconds, and calls it again
# The next call is only made once the current one has returned, so calls
# never overlap and time spent in the callback adds to the period.
# max_ticks bounds the number of calls (None runs until stopped).
# wait gets the interval and returns True if the ticker was stopped
# meanwhile; it defaults to waiting on the stop event.
class Ticker:
    def __init__(self, callback, interval=1.0, max_ticks=None, wait=None):
        self.callback = callback
        self.interval = interval
        self.max_ticks = max_ticks
        self.ticks = 0
        self._stop_event = threading.Event()
        self._wait = wait if wait is not None else self._stop_event.wait
        self._thread = None

    @property
    def stopped(self):
        return self._stop_event.is_set()

    # stop - end the loop, from the callback or from another thread
    def stop(self):
        self._stop_event.set()

    def _out_of_ticks(self):
        return self.max_ticks is not None and self.ticks >= self.max_ticks

    # run - tick in the calling thread until stopped or out of ticks
    def run(self):
        logger.info("Ticker started (interval=%ss)", self.interval)
        while not self.stopped and not self._out_of_ticks():
            try:
                self.callback()
            except Exception:
                logger.exception("Tick %d failed, stopping", self.ticks + 1)
                self.stop()
                raise
            self.ticks += 1
            # no wait after the last tick
            if self._out_of_ticks():
                break
            if self._wait(self.interval) or self.stopped:
                break
        logger.info("Ticker finished after %d ticks", self.ticks)

    # start - run the ticker on a daemon thread
    def start(self):
        if self._thread is not None:
            raise RuntimeError("ticker already started")
        self._thread = threading.Thread(target=self.run, name="ticker",
                                        daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)
