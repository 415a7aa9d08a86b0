"""
Interactive vending machine.

Usage:
    python run_machine.py [--credit-policy NAME] [--catalog FILE]
                          [--log-level LEVEL]
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from structlog import get_logger

from vending.application.services import CreditPolicyNames
from vending.application.use_cases import build_machine, run_shopping_session
from vending.config import AppConfig, get_config
from vending.domain import VendingError
from vending.infrastructure.logger import setup_logging


def setup_arg_parser(config: AppConfig) -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run an interactive vending machine session"
    )
    parser.add_argument(
        "--credit-policy",
        choices=[str(name) for name in CreditPolicyNames],
        default=str(config.machine.credit_policy),
        help="Which inserted money counts as credit",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=config.machine.catalog_file,
        help="Path to a JSON catalog (built-in catalog if omitted)",
    )
    parser.add_argument(
        "--log-level",
        default=config.logger.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with command line values applied."""
    machine = config.machine.model_validate(
        {
            "credit_policy": args.credit_policy,
            "catalog_file": args.catalog,
        }
    )
    logger_config = config.logger.model_validate(
        {**config.logger.model_dump(), "log_level": args.log_level}
    )
    return config.model_copy(
        update={"machine": machine, "logger": logger_config}
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = get_config()
        parser = setup_arg_parser(config)
        args = parser.parse_args(argv)
        config = apply_overrides(config, args)
    except (ValidationError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logger_adapter)
    logger = get_logger("run_machine.py")

    try:
        service = build_machine(config.machine)
        run_shopping_session(service)
        return 0

    except VendingError as e:
        logger.error(f"Machine could not start: {e.message}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Session interrupted")
        return 130

    except Exception:
        logger.exception("Vending machine failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
