# bootstrap/cli.py
# -*- coding: utf-8 -*-
"""
Command-line entry point.

No options are parsed here: every argument is forwarded to the downstream
application, except a leading ``setup`` which only provisions.
"""

import logging
import sys
from typing import List, Optional

from bootstrap.config_loader import load_app_settings
from bootstrap.errors import BootstrapError
from bootstrap.orchestrator import EXIT_FAILURE, run_bootstrap
from common.logging_config import setup_logging

logger = logging.getLogger("bootstrap")


def main(argv: Optional[List[str]] = None) -> int:
    """Load settings, configure logging and run the sequencer."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        app_settings = load_app_settings()
    except BootstrapError as e:
        setup_logging()
        logger.error(f"❌ {e}")
        return EXIT_FAILURE

    setup_logging(
        log_level=app_settings.log_level,
        log_file=app_settings.log_file,
        log_format=app_settings.log_format,
        log_prefix=app_settings.log_prefix,
        symbols=app_settings.symbols,
    )
    return run_bootstrap(args, app_settings=app_settings, logger=logger)


if __name__ == "__main__":
    sys.exit(main())
