"""Check that the configured image provider is reachable before deploying."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Iterable

from trailer_studio.integrations import IntegrationCheckResult, run_all_checks
from trailer_studio.monitoring.logging import configure_logging


def _format_result(result: IntegrationCheckResult) -> str:
    status = "OK" if result.success else "FAIL"
    return f"[{status}] {result.name}: {result.message}"


def report(results: Iterable[IntegrationCheckResult]) -> bool:
    """Print one line per check and return ``True`` when every check passed."""

    passed = True
    for result in results:
        print(_format_result(result))
        passed = passed and result.success
    return passed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run.")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    results = asyncio.run(run_all_checks())
    return 0 if report(results) else 1


if __name__ == "__main__":
    sys.exit(main())
