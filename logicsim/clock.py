import logging

logger = logging.getLogger(__name__)


class SimulationClock:
    """Decides when the next tick happens.

    While running, ``advance`` accumulates frame time and fires once the
    period has elapsed. While paused, time is ignored and ``step`` fires
    a single tick on demand. A rate of 0 Hz fires on every frame.
    """

    DEFAULT_HZ = 10
    NANOS = 1_000_000_000

    def __init__(self, hz=DEFAULT_HZ, paused=False):
        self.tick_count = 0
        self.elapsed_ns = 0
        self.paused = paused
        self.set_rate(hz)

    @property
    def elapsed(self):
        return self.elapsed_ns / self.NANOS

    @property
    def running(self):
        return not self.paused

    def set_rate(self, hz):
        if hz < 0:
            raise ValueError(f"rate must not be negative, got {hz}")
        self.hz = hz
        self.period = 1 / hz if hz else 0.0
        self.period_ns = round(self.NANOS / hz) if hz else 0

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def toggle(self):
        self.paused = not self.paused
        return self.paused

    def advance(self, dt):
        if self.paused:
            return False

        # whole nanoseconds, so frame times like 1/60 add up exactly
        self.elapsed_ns += round(dt * self.NANOS)
        if self.elapsed_ns < self.period_ns:
            return False

        if self.period_ns:
            self.elapsed_ns %= self.period_ns
        else:
            self.elapsed_ns = 0
        return self._fire()

    def step(self):
        if not self.paused:
            logger.warning("step ignored while the clock is running")
            return False
        return self._fire()

    def _fire(self):
        self.tick_count += 1
        logger.debug("tick %d", self.tick_count)
        return True
