from logicsim.circuit import Circuit
from logicsim.clock import SimulationClock
from logicsim.errors import (
    CircuitError,
    InvalidConnection,
    InvalidPin,
    NodeNotFound,
    PayloadError,
)
from logicsim.evaluator import CyclePolicy, Evaluator
from logicsim.gates import Kind
from logicsim.simulation import Simulation

__version__ = "0.1.0"
