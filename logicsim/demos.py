from logicsim.circuit import Circuit


def sr_latch(circuit=None):
    """Cross-coupled NAND latch with active-low set and reset inputs.

    Returns the circuit and a dict of the named handles.
    """
    circuit = circuit if circuit is not None else Circuit()

    s = circuit.insert_node((0, 0), "Input")
    r = circuit.insert_node((0, 100), "Input")
    nand_a = circuit.insert_node((100, 0), "Nand")
    nand_b = circuit.insert_node((100, 100), "Nand")
    q = circuit.insert_node((200, 0), "Output")
    q_bar = circuit.insert_node((200, 100), "Output")

    circuit.set_value(s, True)
    circuit.set_value(r, True)

    circuit.connect(s, nand_a, 0)
    circuit.connect(nand_b, nand_a, 1)
    circuit.connect(r, nand_b, 0)
    circuit.connect(nand_a, nand_b, 1)
    circuit.connect(nand_a, q, 0)
    circuit.connect(nand_b, q_bar, 0)

    return circuit, {
        "s": s,
        "r": r,
        "nand_a": nand_a,
        "nand_b": nand_b,
        "q": q,
        "q_bar": q_bar,
    }


def blinker(circuit=None):
    circuit = circuit if circuit is not None else Circuit()

    clock = circuit.insert_node((0, 0), "Clock")
    inverter = circuit.insert_node((100, 0), "Not")
    led = circuit.insert_node((200, 0), "Output")
    led_bar = circuit.insert_node((200, 100), "Output")

    circuit.connect(clock, led, 0)
    circuit.connect(clock, inverter, 0)
    circuit.connect(inverter, led_bar, 0)

    return circuit, {
        "clock": clock,
        "not": inverter,
        "led": led,
        "led_bar": led_bar,
    }


def half_adder(circuit=None):
    circuit = circuit if circuit is not None else Circuit()

    a = circuit.insert_node((0, 0), "Input")
    b = circuit.insert_node((0, 100), "Input")
    xor = circuit.insert_node((100, 0), "Xor")
    carry_gate = circuit.insert_node((100, 100), "And")
    total = circuit.insert_node((200, 0), "Output")
    carry = circuit.insert_node((200, 100), "Output")

    for gate in (xor, carry_gate):
        circuit.connect(a, gate, 0)
        circuit.connect(b, gate, 1)
    circuit.connect(xor, total, 0)
    circuit.connect(carry_gate, carry, 0)

    return circuit, {
        "a": a,
        "b": b,
        "xor": xor,
        "and": carry_gate,
        "sum": total,
        "carry": carry,
    }


DEMOS = {
    "latch": sr_latch,
    "blinker": blinker,
    "half-adder": half_adder,
}
