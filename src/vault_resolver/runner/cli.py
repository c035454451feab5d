"""Command-line interface for resolving a secret reference."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from vault_resolver.core.config.base import LogLevel
from vault_resolver.core.exceptions import UNEXPECTED_ERROR, VaultError
from vault_resolver.runner.task import ReferenceResolver


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vault-resolve",
        description="Resolve a secret from a Vault server and print it as JSON.",
    )
    parser.add_argument(
        "--params",
        default=None,
        help="Inventory options as a JSON object. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a HOCON file with static options.",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARNING.value,
        help="Set the logging level (default: WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for resolving secrets.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 for success, 1 for a resolution failure, 2 for
        unusable input.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    raw = args.params if args.params is not None else sys.stdin.read()
    try:
        inventory = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON parameters: %s", exc)
        return 2
    if not isinstance(inventory, dict):
        logger.error("Parameters must be a JSON object, got %s", type(inventory).__name__)
        return 2

    try:
        resolver = ReferenceResolver.from_file(args.config) if args.config else ReferenceResolver()
    except Exception as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 2

    try:
        result = resolver.resolve(inventory)
    except VaultError as exc:
        logger.error("Secret resolution failed: %s", exc)
        print(json.dumps(exc.to_dict()))
        return 1
    except Exception as exc:
        logger.error("Unexpected failure resolving secret: %s", exc)
        error = VaultError(str(exc), UNEXPECTED_ERROR, {"type": type(exc).__name__})
        print(json.dumps(error.to_dict()))
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
