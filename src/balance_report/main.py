"""
Entry point: load config.yaml, fetch balances, print the report.

Run: python -m balance_report  (or the balance-report script)
"""

import asyncio
import logging

from balance_report.config_loader import DEFAULT_CONFIG_PATH, load_config
from balance_report.core.balances import get_wallet_balances
from balance_report.errors import BalanceReportError
from balance_report.reporter import print_report
from balance_report.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


async def run_report(config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Load config, query every wallet, print the report to stdout."""
    cfg = load_config(config_path)
    setup_logging(cfg.log_level, cfg.log_file)

    balances = await get_wallet_balances(cfg)
    print_report(balances)


def main(config_path: str = DEFAULT_CONFIG_PATH) -> int:
    """Run the report. Returns the process exit code."""
    # Console logging before config is read, so load errors are visible
    setup_logging(logging.INFO)
    try:
        asyncio.run(run_report(config_path))
    except BalanceReportError as e:
        logger.error(f"Balance report failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
