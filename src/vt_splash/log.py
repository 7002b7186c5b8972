"""Logging setup.

The renderer owns the terminal while the splash screen is up, so log
records go either to a file or, by default, to stderr through rich at
WARNING level (restoration failures are reported after the screen is
released).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """Configure the ``vt_splash`` logger hierarchy and return its root."""
    root = logging.getLogger("vt_splash")
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    root.addHandler(handler)
    root.propagate = False
    return root
