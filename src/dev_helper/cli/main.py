# src/dev_helper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, matches argv against the command registry
and runs exactly one handler. This is the only place that turns failures into
exit codes.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import CommandRegistry, registry as command_registry
from ..config import get_settings
from ..connectors.console_connector import emit, print_error
from ..core.errors import HelperError
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERNAL = 2
EXIT_INTERRUPTED = 130


def dispatch(
    state: AppState,
    argv: Sequence[str],
    *,
    registry: CommandRegistry = command_registry,
) -> int:
    """Run the handler matching argv. Returns the process exit code."""
    prog = str(getattr(state.settings, "app_name", "helper"))

    if not argv:
        print(registry.build_help(prog))
        return EXIT_OK

    match = registry.resolve(argv)
    if match is None:
        print_error(f"Unknown command: {' '.join(argv)}")
        print(registry.build_help(prog), file=sys.stderr)
        return EXIT_USAGE

    logger.info("Command: %s args=%d", match.name, len(match.args))

    try:
        reply = match.handler(state, match.args, emit)
    except HelperError as e:
        logger.info("Command %s failed: %s", match.name, e.message)
        print_error(e.message)
        return e.exit_code
    except KeyboardInterrupt:
        print()
        logger.info("Command %s interrupted.", match.name)
        return EXIT_INTERRUPTED
    except EOFError:
        print_error("No input available.")
        return EXIT_FAILURE
    except Exception:
        logger.exception("Command %s crashed.", match.name)
        print_error("Internal error; see the log file for details.")
        return EXIT_INTERNAL

    if reply:
        print(reply)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    args = list(sys.argv[1:] if argv is None else argv)
    state = create_initial_state(settings=settings)
    return dispatch(state, args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
