#!/usr/bin/env python3
"""
Package entry point for file_explorer.
Allows the package to be run as: python -m file_explorer

Command-line arguments are ignored. Settings come from the JSON file
named by FILE_EXPLORER_CONFIG and FILE_EXPLORER_* environment variables.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .core.application_context import ApplicationContext
from .operations.browse_operation import BrowseOperation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point

    Args:
        argv: Accepted for console-script compatibility and ignored

    Returns:
        Exit code (0 for success)
    """
    logger = logging.getLogger('file_explorer')
    context = None

    try:
        context = ApplicationContext()
        start_dir = Path.cwd()

        print("\n==== File Explorer ====")
        operation = BrowseOperation(context)
        operation.execute(start_dir=start_dir)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print()

    except Exception as e:
        logger.error(f"File explorer failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    finally:
        if context is not None:
            context.cleanup()

    print("\nExiting File Explorer. Goodbye!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
