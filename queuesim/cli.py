"""
Console entry point.

Reads the eight configuration integers (seed, multiplier, increment, mod,
clients, servers, arrivals/min, services/min per server) from the command
line, or from stdin when none are given, and prints the event trace.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .analytical import predict
from .engine import SimulationEngine
from .errors import SimulationError
from .models import SimulationConfig
from .render import TextRenderer
from .simulation import summarize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="queuesim",
        description="Simulate a single-queue, multi-server service center.",
    )
    parser.add_argument(
        "values", nargs="*", type=int, metavar="N",
        help="seed multiplier increment mod clients servers arrival_rate service_rate "
             "(read from stdin if omitted)",
    )
    parser.add_argument("--delay", type=float, default=0.0,
                        help="wall-clock seconds to pause per simulated second (default: 0)")
    parser.add_argument("--json", action="store_true", help="print events as JSON lines")
    parser.add_argument("--summary", action="store_true",
                        help="print summary statistics and the analytical estimate")
    parser.add_argument("--log-level", default=os.getenv("QUEUESIM_LOG_LEVEL", "WARNING"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def _read_stdin_values(stream) -> List[int]:
    return [int(tok) for tok in stream.read().split()]


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        values = args.values or _read_stdin_values(stdin)
        config = SimulationConfig.from_values(values)
        config.validate()
    except ValueError as e:
        logger.error("Bad input: %s", e)
        return 2

    try:
        engine = SimulationEngine(config)
    except SimulationError as e:
        logger.error("%s", e)
        return 1

    events = []
    if args.json:
        for ev in engine.iter_events():
            events.append(ev)
            stdout.write(json.dumps(ev.to_dict()) + "\n")
    else:
        renderer = TextRenderer(stdout, delay=args.delay)
        for ev in engine.iter_events():
            events.append(ev)
            renderer(ev)

    if args.summary:
        summary = summarize(events, config.server_count).summary
        estimate = predict(config)
        stdout.write("\n=== Summary ===\n")
        stdout.write(f"Clients served:   {summary.clients_served}\n")
        stdout.write(f"End time:         {summary.end_time}s\n")
        stdout.write(f"Mean wait:        {summary.mean_wait:.2f}s (max {summary.max_wait}s)\n")
        stdout.write(f"Mean turnaround:  {summary.mean_turnaround:.2f}s\n")
        stdout.write(f"Max queue length: {summary.max_queue_length}\n")
        for server, util in summary.utilization.items():
            stdout.write(f"Server #{server} utilization: {util:.1%}\n")
        stdout.write("\n=== Analytical G/G/c estimate ===\n")
        stdout.write(f"Utilization: {estimate.utilization}\n")
        stdout.write(f"Wq: {estimate.Wq}s  W: {estimate.W}s  Lq: {estimate.Lq}\n")
        if estimate.note:
            stdout.write(f"Note: {estimate.note}\n")

    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
