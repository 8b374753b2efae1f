"""Command-line entry point: python -m pulse_sandbox"""
import argparse
import logging

from pulse_sandbox.config import Direction, SimulationParameters, start_center
from pulse_sandbox.logging_config import setup_logging
from pulse_sandbox.pulses import PulseShape, parse_shape


def build_parser():
    ap = argparse.ArgumentParser(prog="pulse-sandbox", description="Traveling pulse sandbox")
    ap.add_argument("--shape", default=PulseShape.NON_SYMMETRIC_TRIANGLE.value,
                    help="initial pulse shape: " + ", ".join(s.value for s in PulseShape))
    ap.add_argument("--direction", default=Direction.RIGHT.value, choices=[d.value for d in Direction])
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None)
    return ap


def initial_params(args):
    direction = Direction(args.direction)
    return SimulationParameters(
        shape=parse_shape(args.shape),
        direction=direction,
        initial_center=start_center(direction),
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    # imported late so --help works without a display
    from pulse_sandbox.app import App

    App(initial_params(args)).mainloop()


if __name__ == "__main__":
    main()
