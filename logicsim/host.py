import argparse
import logging
import sys
import time

from logicsim import config as configuration
from logicsim.demos import DEMOS
from logicsim.errors import PayloadError
from logicsim.evaluator import CyclePolicy
from logicsim.simulation import Simulation

logger = logging.getLogger(__name__)


def run(simulation, frames, frame_rate, realtime=False):
    """Drive ``simulation`` for a number of frames of equal length."""
    dt = 1 / frame_rate
    last = dict(simulation.outputs)

    for _ in range(frames):
        outputs = simulation.advance(dt)
        if outputs != last:
            logger.info("tick %d: %s", simulation.tick_count, outputs)
            last = outputs
        if realtime:
            time.sleep(dt)

    return simulation.outputs


def parse_inputs(values):
    inputs = {}
    for item in values:
        name, _, value = item.partition("=")
        if value.lower() not in ("0", "1", "true", "false"):
            raise argparse.ArgumentTypeError(
                f"input {item!r} must look like NAME=0 or NAME=1"
            )
        inputs[name] = value.lower() in ("1", "true")
    return inputs


def build_parser():
    parser = argparse.ArgumentParser(
        prog="logic-sim",
        description="Run a demo circuit without the editor.",
    )
    parser.add_argument("--demo", choices=sorted(DEMOS), default="latch")
    parser.add_argument("--config", help="JSON file overriding defaults")
    parser.add_argument("--frames", type=int, default=60)
    parser.add_argument("--frame-rate", type=float)
    parser.add_argument("--hz", type=float)
    parser.add_argument("--paused", action="store_true")
    parser.add_argument(
        "--steps",
        type=int,
        default=0,
        help="single steps to run after the frames, pausing first",
    )
    parser.add_argument(
        "--policy", choices=[policy.value for policy in CyclePolicy]
    )
    parser.add_argument(
        "--set",
        dest="inputs",
        action="append",
        default=[],
        metavar="NAME=0|1",
        help="set a named demo input",
    )
    parser.add_argument("--log-level")
    parser.add_argument("--realtime", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    config = configuration.load(args.config)

    logging.basicConfig(
        level=(args.log_level or config["logging"]["level"]).upper(),
        format=config["logging"]["format"],
    )

    if args.hz is not None:
        config["simulation"]["rate_hz"] = args.hz
    if args.paused:
        config["simulation"]["paused"] = True
    if args.policy:
        config["simulation"]["cycle_policy"] = args.policy
    frame_rate = args.frame_rate or config["host"]["frame_rate"]

    circuit, handles = DEMOS[args.demo]()
    try:
        inputs = parse_inputs(args.inputs)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    for name, value in inputs.items():
        if name not in handles:
            parser.error(f"{args.demo} has no node named {name!r}")
        try:
            circuit.set_value(handles[name], value)
        except PayloadError as e:
            parser.error(str(e))

    simulation = Simulation.from_config(config, circuit)
    run(simulation, args.frames, frame_rate, realtime=args.realtime)

    if args.steps:
        simulation.pause()
        for _ in range(args.steps):
            simulation.step()

    names = {id: name for name, id in handles.items()}
    print(f"tick {simulation.tick_count}")
    for id in circuit.outputs():
        print(f"{names[id]} = {int(circuit.get_value(id))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
