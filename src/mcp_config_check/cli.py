from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mcp_config_check.errors import ConfigCheckError
from mcp_config_check.models import DEFAULT_CONFIG_FILENAME
from mcp_config_check.report import render_failure, render_header, render_report
from mcp_config_check.validator import ConfigValidator

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mcp-config-check",
        description="Check the shape of an MCP server configuration and its .env file.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        default=None,
        help=f"Path to the MCP configuration (default: ./{DEFAULT_CONFIG_FILENAME})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    validator = ConfigValidator(args.config)
    print("\n".join(render_header()))
    try:
        report = validator.validate()
    except ConfigCheckError as exc:
        logger.debug("validation stopped with %s", exc)
        print(render_failure(exc), file=sys.stderr)
        return 1

    print("\n".join(render_report(report)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
