#!/usr/bin/env python3
"""
Swarm - Scenario Runner
=======================

Run with: python -m swarm.main [--scenario PATH] [--verbose] [--log-file PATH]

Replays a join/leave scenario against a fresh PackCoordinator and prints
every rat's final attack.
"""
import argparse

from .config import DEFAULT_SCENARIO, load_scenario
from .core.events import EventBus
from .core.handlers import LoggerHandler
from .core.pack import PackCoordinator
from .core.scenario import run_scenario


def main(argv=None):
    parser = argparse.ArgumentParser(description="Swarm - replay rat pack scenarios")
    parser.add_argument('--scenario', default=str(DEFAULT_SCENARIO),
                        help='Scenario JSON file (default: bundled data/scenario.json)')
    parser.add_argument('--verbose', action='store_true',
                        help='Also log every pack attack broadcast')
    parser.add_argument('--log-file', default=None,
                        help='Append log lines to this file')
    args = parser.parse_args(argv)

    scenario = load_scenario(args.scenario)

    bus = EventBus()
    logger = LoggerHandler(bus, verbose=args.verbose, log_file=args.log_file)
    coordinator = PackCoordinator(bus=bus)

    print(f"Scenario: {scenario.get('name', args.scenario)}")
    rats = run_scenario(scenario, coordinator)

    print()
    for name, rat in rats.items():
        print(f"{name}: attack {rat.attack} ({rat.state}, group {rat.group_id})")

    logger.detach()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
