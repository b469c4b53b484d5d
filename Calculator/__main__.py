"""Command-line entry point: ``python -m Calculator`` or the ``expression-calculator`` script.

Starts the Qt GUI by default, the console loop with --console, a single evaluation with --once.
"""
import argparse
import logging
import sys

from . import config_manager as config_manager
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="expression-calculator",
                                     description="Arithmetic expression calculator (+ - * / ^ and parentheses).")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--console", action="store_true", help="run the line-based console instead of the GUI")
    mode.add_argument("--once", action="store_true", help="evaluate a single line from the console and exit")
    return parser.parse_args(argv)


def main(argv=None):

    """
    Load configuration and start the requested front-end.
    - Keep this thin: no business logic here.
    """

    args = parse_args(argv)
    all_settings = config_manager.load_setting_value("all")
    setup_logging("DEBUG" if all_settings["debug"] else "WARNING")
    logger.debug("Config loaded: %s", all_settings)

    # The GUI stack is only imported when it is needed
    if args.console or args.once:
        from . import Console
        return Console.run_once() if args.once else Console.run()

    from . import UI
    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
