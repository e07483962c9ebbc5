"""
AddrCheck Logging Configuration

Centralized logging setup for the command-line tool.

Configures:
- Console output to stdout
- Optional file logging with rotation and gzip compression
- Log level management (INFO/DEBUG/WARNING)

The validator core never logs; only the CLI and configuration loader do.

Author: AddrCheck Project
License: GNU GPL v3
"""

import logging
import logging.handlers
import sys
import os
import gzip
import shutil
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_MAX_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 5


def _gzip_rotator(source, dest):
    """
    Compress a rotated log file with gzip and remove the original.

    Args:
        source: Source log file path
        dest: Destination path for rotated log
    """
    with open(source, 'rb') as f_in:
        with gzip.open(f'{dest}.gz', 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)
    os.remove(source)


def setup_logging(level=logging.INFO, log_file: Optional[str] = None):
    """
    Configure application-wide logging.

    Args:
        level: Logging level (logging.INFO, logging.DEBUG, etc.)
        log_file: Optional path for a rotating, gzip-compressed log file

    Example:
        >>> setup_logging(level=logging.DEBUG)  # Verbose mode
        >>> setup_logging(log_file='/var/log/addrcheck.log')
    """
    handlers = [
        logging.StreamHandler(sys.stdout)
    ]

    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT
            )
            file_handler.rotator = _gzip_rotator
            handlers.append(file_handler)
        except (PermissionError, OSError) as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)
            print("Logging to console only", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
