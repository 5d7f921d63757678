"""Demand-driven evaluation of input pins.

A pin's value is the OR of the values of every node wired into it. Gate
outputs are computed on demand from their own input pins, so evaluating the
pin of an Output node walks the circuit backwards from that pin.

Feedback loops are cut where the walk reaches a pin that is still being
resolved further up the walk. What such a pin reads depends on the
:class:`CyclePolicy`:

``low``
    The pin reads ``False``.
``hold``
    The pin reads the value it resolved to on the previous refresh, or
    ``False`` if it has never been resolved.

With ``hold`` a cross-coupled NAND pair keeps its state between ticks,
which is how latches are built out of plain gates. Under the default
``low`` policy the same latch settles on every tick but does not remember
its state: once both of its inputs are held high it always reads set.
"""

import logging
from enum import Enum

from logicsim.errors import CircuitError
from logicsim.gates import Kind

logger = logging.getLogger(__name__)


class CyclePolicy(Enum):
    LOW = "low"
    HOLD = "hold"


class Pass:
    """Resolved and in-progress pins for one tick."""

    def __init__(self, circuit, tick, fallback):
        self.circuit = circuit
        self.tick = tick
        self.fallback = fallback
        self.memo = {}
        self.in_progress = set()

    def resolved(self):
        return {pin: value for (pin, _), value in self.memo.items()}

    def value(self, pin):
        key = (pin, self.tick)
        if key in self.memo:
            return self.memo[key]

        # Each frame is a generator that yields the pins it needs and
        # returns its own value, so deep circuits never hit the
        # interpreter's recursion limit.
        self.in_progress.add(pin)
        stack = [(pin, self._resolve(pin))]
        sent = None
        while stack:
            current, frame = stack[-1]
            try:
                request = frame.send(sent)
            except StopIteration as done:
                stack.pop()
                self.in_progress.discard(current)
                self.memo[(current, self.tick)] = done.value
                sent = done.value
                continue

            if (request, self.tick) in self.memo:
                sent = self.memo[(request, self.tick)]
            elif request in self.in_progress:
                sent = self.fallback(request)
                logger.debug(
                    "feedback into %s at tick %d reads %s",
                    request,
                    self.tick,
                    sent,
                )
            else:
                self.in_progress.add(request)
                stack.append((request, self._resolve(request)))
                sent = None

        return self.memo[key]

    def _resolve(self, pin):
        value = False
        for source in self.circuit.input_sources(*pin):
            kind = self.circuit.kind(source)

            if kind is Kind.INPUT:
                value |= self.circuit.get_value(source)
            elif kind is Kind.CLOCK:
                value |= self.tick % 2 == 0
            elif kind.is_logic:
                inputs = []
                for index in range(kind.inputs):
                    inputs.append((yield (source, index)))
                value |= kind.apply(*inputs)
            else:
                raise CircuitError(
                    f"{kind.title} node {source} cannot drive pin {pin}"
                )

        return value


class Evaluator:
    def __init__(self, circuit, cycle_policy=CyclePolicy.LOW):
        self.circuit = circuit
        self.cycle_policy = CyclePolicy(cycle_policy)
        self.previous = {}

    def _fallback(self, pin):
        if self.cycle_policy is CyclePolicy.HOLD:
            return self.previous.get(pin, False)
        return False

    def evaluate(self, target, input_index, tick):
        """Value present at one input pin, evaluated on its own."""
        return Pass(self.circuit, tick, self._fallback).value(
            (target, input_index)
        )

    def refresh(self, tick):
        """Recompute every Output node for ``tick``.

        All values are computed before any Output is written, so a reader
        never sees a half-refreshed circuit. Returns a mapping of Output
        handle to its new value.
        """
        current = Pass(self.circuit, tick, self._fallback)
        results = {
            id: current.value((id, 0)) for id in self.circuit.outputs()
        }

        for id, value in results.items():
            self.circuit.set_value(id, value)
        self.previous = current.resolved()

        logger.debug("refreshed %d outputs at tick %d", len(results), tick)
        return results
