import pytest

from logicsim import host
from logicsim.demos import blinker
from logicsim.simulation import Simulation


def test_run_counts_frames():
    circuit, handles = blinker()
    simulation = Simulation(circuit, hz=2)

    outputs = host.run(simulation, frames=60, frame_rate=4)

    assert simulation.tick_count == 30
    assert outputs[handles["led"]] is True


def test_main_prints_outputs(capsys):
    argv = ["--demo", "half-adder", "--set", "a=1", "--set", "b=1"]
    assert host.main(argv + ["--frames", "1", "--hz", "0"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["tick 1", "sum = 0", "carry = 1"]


def test_main_steps_while_paused(capsys):
    host.main(["--demo", "blinker", "--paused", "--steps", "3"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["tick 3", "led = 0", "led_bar = 1"]


def test_main_latch_holds(capsys):
    argv = ["--demo", "latch", "--policy", "hold", "--set", "r=0"]
    host.main(argv + ["--frames", "2", "--hz", "0"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["tick 2", "q = 0", "q_bar = 1"]


def test_main_rejects_unknown_input():
    with pytest.raises(SystemExit):
        host.main(["--demo", "blinker", "--set", "x=1"])


def test_main_rejects_bad_input_value():
    with pytest.raises(SystemExit):
        host.main(["--demo", "latch", "--set", "s=maybe"])


def test_main_rejects_input_on_gate_without_value():
    with pytest.raises(SystemExit):
        host.main(["--demo", "half-adder", "--set", "xor=1", "--frames", "1"])
