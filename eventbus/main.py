"""Demo entry point: one bus, one handler, one published event."""

from __future__ import annotations

import argparse
import logging

from eventbus.domain.bus import EventBus
from eventbus.domain.events import TestEvent


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eventbus-demo",
        description="Publish a single TestEvent through an in-process event bus",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log bus activity at DEBUG level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Creating EventBus")
    event_bus = EventBus(name="demo")

    print("Subscribing to events")
    event_bus.subscribe(TestEvent, lambda _: print("TestEvent occurred"))

    # Returns only after the handler above has printed.
    print("Publishing event")
    event_bus.publish(TestEvent())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
