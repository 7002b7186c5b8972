"""Keyboard shortcut definitions.

Shortcuts pair the keys that trigger them with a short label.
"""

from __future__ import annotations

from dataclasses import dataclass

from vt_splash.cli.core.input import InputEvent, Key, KeyEvent


@dataclass(frozen=True)
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        id: Unique identifier for the shortcut
        keys: Keys/chars that trigger this shortcut (chars are case-sensitive)
        label: Short label for hints (e.g., "Close")
    """
    id: str
    keys: tuple[str | Key, ...]
    label: str

    def matches(self, event: InputEvent) -> bool:
        """Check if an input event matches this shortcut."""
        if not isinstance(event, KeyEvent):
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.key is None and event.char == key:
                return True
        return False


# Only lowercase 'q' closes the view; 'Q' is deliberately not bound.
EXIT_SHORTCUT = ShortcutDef(
    id="close",
    keys=(Key.ENTER, Key.ESCAPE, "q"),
    label="Close",
)
