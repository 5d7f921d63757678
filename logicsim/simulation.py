from logicsim.circuit import Circuit
from logicsim.clock import SimulationClock
from logicsim.evaluator import CyclePolicy, Evaluator


class Simulation:
    """A circuit together with the clock that re-evaluates it.

    The host loop owns the simulation and calls ``advance`` once per frame
    with the frame's duration in seconds.
    """

    def __init__(
        self,
        circuit=None,
        hz=SimulationClock.DEFAULT_HZ,
        paused=False,
        cycle_policy=CyclePolicy.LOW,
    ):
        self.circuit = circuit if circuit is not None else Circuit()
        self.evaluator = Evaluator(self.circuit, cycle_policy)
        self.clock = SimulationClock(hz, paused)
        self.outputs = {}

    @classmethod
    def from_config(cls, config, circuit=None):
        settings = config["simulation"]
        return cls(
            circuit,
            hz=settings["rate_hz"],
            paused=settings["paused"],
            cycle_policy=settings["cycle_policy"],
        )

    @property
    def tick_count(self):
        return self.clock.tick_count

    @property
    def running(self):
        return self.clock.running

    @property
    def hz(self):
        return self.clock.hz

    def set_rate(self, hz):
        self.clock.set_rate(hz)

    def pause(self):
        self.clock.pause()

    def resume(self):
        self.clock.resume()

    def toggle_pause(self):
        return self.clock.toggle()

    def advance(self, dt):
        if self.clock.advance(dt):
            self._refresh()
        return dict(self.outputs)

    def step(self):
        if self.clock.step():
            self._refresh()
        return dict(self.outputs)

    def _refresh(self):
        self.outputs = self.evaluator.refresh(self.clock.tick_count)
