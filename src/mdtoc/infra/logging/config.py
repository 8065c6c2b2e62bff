from __future__ import annotations

"""
Logging Settings.

mdtoc reports on stderr so that stdout stays free for the run summary and
the --json payload. A rotating file can be added for unattended runs such
as CI jobs or pre-commit hooks.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    name: getattr(logging, name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one mdtoc run.

    Unknown level names fall back to INFO. The rotating file keeps
    ``backup_count`` archives of at most ``max_bytes`` each.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 3

    console_fmt: str = "mdtoc %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Console at INFO (DEBUG with --debug), plus the optional --log-file."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
