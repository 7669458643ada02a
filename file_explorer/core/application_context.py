"""
Application Context for Dependency Injection
Manages shared resources across the application lifecycle
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from file_explorer.utils.config_manager import ConfigManager
from file_explorer.utils.logging_config import setup_logging


class ApplicationContext:
    """
    Central context for application-wide resources.

    Created once at startup and passed to the operation, so components
    receive configuration explicitly instead of reading globals.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
        quiet: bool = True,
        configure_logging: bool = True
    ):
        """
        Initialize application context with shared resources

        Args:
            config_path: Path to configuration file (else FILE_EXPLORER_CONFIG)
            environ: Environment mapping for overrides (defaults to os.environ)
            quiet: Keep log records off the console
            configure_logging: Set up file logging from the loaded config
        """
        self.config_manager = ConfigManager(environ=environ)
        self._config = self.config_manager.load_config(config_path)

        self.quiet = quiet
        self.log_dir = Path(self._config['log_dir'])
        self.logging_error: Optional[str] = None
        if configure_logging:
            self._init_logging()
        self.logger = logging.getLogger('file_explorer')
        self.logger.info("Initialized application context")

    def _init_logging(self):
        """
        Set up file logging; an unusable log directory leaves the browser
        running without log files
        """
        try:
            setup_logging(
                operation='browse',
                log_dir=self.log_dir,
                level=self._config['log_level'],
                json_format=self._config['json_logs'],
                quiet=self.quiet
            )
        except (OSError, ValueError) as e:
            self.logging_error = str(e)
            app_logger = logging.getLogger('file_explorer')
            for handler in list(app_logger.handlers):
                app_logger.removeHandler(handler)
                handler.close()
            app_logger.addHandler(logging.NullHandler())
            app_logger.propagate = False
            if not self.quiet:
                print(f"WARNING: logging disabled, cannot use {self.log_dir}: {e}", file=sys.stderr)

    @property
    def config(self) -> Dict[str, Any]:
        """Effective configuration"""
        return self._config

    @property
    def preview_max_lines(self) -> int:
        return self._config['preview_max_lines']

    @property
    def binary_probe_bytes(self) -> int:
        return self._config['binary_probe_bytes']

    def cleanup(self):
        """Flush log handlers before exit"""
        self.logger.info("Cleaning up application context")
        for handler in self.logger.handlers:
            handler.flush()
