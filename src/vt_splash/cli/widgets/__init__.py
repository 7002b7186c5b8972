"""Reusable TUI widgets."""

from vt_splash.cli.widgets.base import BaseWidget
from vt_splash.cli.widgets.block import Block
from vt_splash.cli.widgets.bullet_list import BulletList, bullet_spans
from vt_splash.cli.widgets.paragraph import Paragraph

__all__ = [
    "BaseWidget",
    "Block",
    "BulletList",
    "Paragraph",
    "bullet_spans",
]
