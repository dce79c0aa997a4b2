"""Support for command-line execution using `python -m term_spin`"""

from __future__ import annotations

import logging as _logging
import sys

from .exit_codes import FAILURE, INTERRUPTED, codes
from .logging import log_exception


def main() -> int:
    """CLI execution entry-point"""
    from . import cli

    try:
        exit_code = cli.main()
    except KeyboardInterrupt:
        _logger.critical("Session interrupted")
        return INTERRUPTED
    except Exception:
        log_exception("Session terminated", _logger)
        return FAILURE
    else:
        _logger.info(f"Session ended with return-code {exit_code} ({codes[exit_code]})")
        return exit_code


_logger = _logging.getLogger("term_spin")

if __name__ == "__main__":
    sys.exit(main())
