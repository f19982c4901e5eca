"""Command line entry point: parse a repeating interval and print it as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from bpmn_time.config.logging import configure_logging
from bpmn_time.config.settings import check_interval_designator, load_settings
from bpmn_time.timer.repeating_interval import try_parse

logger = logging.getLogger(__name__)

EXIT_FORMAT_ERROR = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Parse `TEXT` and print the resulting value, or report why it is malformed."""

    load_dotenv(".env")
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="bpmn-time",
        description="Parse an ISO-8601 repeating interval such as R5/PT1H.",
    )
    parser.add_argument("text", help="Repeating interval text, e.g. R/PT1H or R5/PT1H.")
    parser.add_argument(
        "--designator",
        default=settings.interval_designator,
        help="Separator between the repetition marker and the interval "
             f"(default: {settings.interval_designator!r}).",
    )
    args = parser.parse_args(argv)
    try:
        check_interval_designator(args.designator)
    except ValueError as exc:
        parser.error(f"--designator: {exc}")

    configure_logging(settings.log_level)

    result = try_parse(args.text, args.designator)
    if not result.ok:
        logger.warning("invalid repeating interval %r: %s", args.text, result.error)
        print(
            f"error: {result.error} (position {result.error.error_index})",
            file=sys.stderr,
        )
        return EXIT_FORMAT_ERROR

    print(result.value.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
