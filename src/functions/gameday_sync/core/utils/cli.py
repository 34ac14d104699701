"""
Simple CLI Helpers
-------------------

Shared plumbing for the gameday sync command-line scripts:

* **setup_cli_parser** builds a parser with the common flags `--dry-run`
  (build the snapshots but do not write them), `--verbose`, `--log-level`
  and `--output-dir` (write snapshots somewhere other than the configured
  directory).
* **setup_cli_logging** configures logging from the parsed flags.
* **print_results** prints a human readable summary of a pipeline result.
* **handle_cli_errors** wraps a script's ``main`` and turns its outcome
  into an exit code (0 for success, 1 for failure), including reference
  data load failures and unexpected errors.
"""

import argparse
from typing import Any, Callable, Dict

from src.shared.utils.logging import setup_logging

from ..errors import FatalLoadError


def setup_cli_parser(description: str,
                     add_common_args: bool = True) -> argparse.ArgumentParser:
    """Create a standardized CLI argument parser.

    Args:
        description: A short description shown by ``--help``.
        add_common_args: Whether to include the standard flags for dry
            runs, verbose logging, log level and output directory.

    Returns:
        A configured ``ArgumentParser`` ready for script-specific arguments.
    """
    parser = argparse.ArgumentParser(description=description)

    if add_common_args:
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Build snapshots without writing them"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose logging"
        )
        parser.add_argument(
            "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            default="INFO",
            help="Set logging level"
        )
        parser.add_argument(
            "--output-dir",
            default=None,
            help="Directory to write snapshot files to (defaults to GAMEDAY_OUTPUT_DIR)"
        )

    return parser


def handle_cli_errors(func: Callable) -> Callable:
    """Decorator to handle common CLI errors and normalize exit codes.

    Returns 0 when the wrapped function returns a truthy value and 1 when it
    returns a falsy value, raises :class:`FatalLoadError`, is interrupted or
    fails unexpectedly.
    """
    def wrapper(*args, **kwargs) -> int:
        try:
            result = func(*args, **kwargs)
            return 0 if bool(result) else 1
        except KeyboardInterrupt:
            print("\nOperation cancelled by user")
            return 1
        except FatalLoadError as e:
            print(f"Fatal: {e}")
            return 1
        except Exception as e:
            print(f"Unexpected error: {str(e)}")
            return 1

    return wrapper


def setup_cli_logging(args: argparse.Namespace) -> None:
    """Set up logging from the ``--verbose`` and ``--log-level`` flags."""
    log_level = "DEBUG" if getattr(args, 'verbose', False) else getattr(args, 'log_level', 'INFO')
    setup_logging(level=log_level)


def print_results(result: Dict[str, Any],
                  operation: str = "operation",
                  dry_run: bool = False) -> None:
    """Print standardized results from a pipeline run.

    Args:
        result: ``PipelineResult`` or its dictionary form.
        operation: Name of the operation for display purposes.
        dry_run: Whether this was a dry run.
    """
    if hasattr(result, "to_dict"):
        result = result.to_dict()

    if result.get("success"):
        if dry_run:
            print(f"DRY RUN - Would perform {operation}")
            if "records_processed" in result:
                print(f"Prepared records: {result['records_processed']}")
        else:
            print(f"✅ Successfully completed {operation}")
            if "records_processed" in result:
                print(f"Processed: {result['records_processed']} records")
            if "files_written" in result:
                print(f"Written: {result['files_written']} files")
        for message in result.get("messages", []):
            print(message)
    else:
        error_msg = result.get("error", result.get("message", "Unknown error"))
        print(f"❌ {operation.capitalize()} failed: {error_msg}")
