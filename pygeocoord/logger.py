# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pygeocoord

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves. Applications call :func:`setup_logger` or
:func:`setup_logger_from_config` to see the output, e.g. the per-iteration
TRACE records of the ECEF to geodetic solver.
"""

import logging
import sys
from enum import Enum
from typing import Optional, Union

ROOT_LOGGER = "pygeocoord"


class LogLevel(Enum):
    """Log levels understood by :func:`setup_logger`"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


# Add TRACE level to logging
logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log ``message`` at TRACE level"""
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


logging.Logger.trace = trace


def _level_value(level: Union[str, int, LogLevel]) -> int:
    if isinstance(level, LogLevel):
        return level.value
    if isinstance(level, int):
        return level
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        raise ValueError(f"Unknown log level: {level}") from None


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for terminal output"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so file handlers sharing the record stay uncoloured
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = ROOT_LOGGER,
                 level: Union[str, int, LogLevel] = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Attach console and/or file handlers to a logger

    Parameters:
    -----------
    name : str
        Logger name, ``"pygeocoord"`` covers the whole package
    level : str, int or LogLevel
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable coloured output on stdout

    Returns:
    --------
    logging.Logger
        Configured logger

    Raises:
    -------
    ValueError
        If ``level`` is not a known level name
    """
    value = _level_value(level)
    logger = logging.getLogger(name)
    logger.setLevel(value)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(value)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(value)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)


class LogContext:
    """Context manager for a temporary log level change

    Examples
    --------
    >>> import logging
    >>> with LogContext(logging.getLogger("pygeocoord"), "TRACE"):
    ...     pass
    """

    def __init__(self, logger: logging.Logger, level: Union[str, int, LogLevel]):
        self.logger = logger
        self.new_level = _level_value(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Per-module log level configuration"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "WARNING"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set log level for a specific module, e.g. ``pygeocoord.coordinate.engine``"""
        _level_value(level)
        self.module_levels[module_name] = level
        logger = logging.getLogger(module_name)
        if logger.handlers:
            logger.setLevel(_level_value(level))
            for handler in logger.handlers:
                handler.setLevel(_level_value(level))

    def get_level_for_module(self, module_name: str) -> str:
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Configure from dictionary"""
        if 'default_level' in config:
            _level_value(config['default_level'])
            self.default_level = config['default_level']
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def setup_all_loggers(self):
        setup_logger(ROOT_LOGGER, self.default_level, self.log_file, self.console)

        for module, level in self.module_levels.items():
            module_logger = setup_logger(module, level, self.log_file, self.console)
            # Module handlers already emit; do not repeat on the package handler
            module_logger.propagate = False


# Global logger configuration
logger_config = LoggerConfig()


def setup_logger_from_config(config: dict):
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'geodetic.log',
        'console': True,
        'module_levels': {
            'pygeocoord.coordinate.engine': 'TRACE',
        }
    }
    """
    logger_config.configure_from_dict(config)
    logger_config.setup_all_loggers()


logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    'LogLevel', 'ColoredFormatter', 'setup_logger', 'get_logger',
    'LogContext', 'LoggerConfig', 'logger_config', 'setup_logger_from_config',
]
