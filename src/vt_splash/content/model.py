"""Display content contracts shared by providers and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from vt_splash.errors import ConfigError


@dataclass(frozen=True)
class DisplayItem:
    """A single piece of display text: a label, optionally with a detail."""
    label: str
    detail: Optional[str] = None

    @property
    def text(self) -> str:
        if self.detail is None:
            return self.label
        return f"{self.label}: {self.detail}"


@dataclass(frozen=True)
class Section:
    """A titled, ordered group of items. Render order is item order."""
    title: str
    items: tuple[DisplayItem, ...] = field(default_factory=tuple)


class Template(Enum):
    """Screen arrangement used for the body region."""
    SINGLE_COLUMN_FACTS = "single-column-facts"
    TWO_COLUMN_FEATURES = "two-column-features"

    @classmethod
    def parse(cls, value: str | Template) -> Template:
        if isinstance(value, Template):
            return value
        choices = ", ".join(t.value for t in cls)
        if not isinstance(value, str):
            raise ConfigError(f"template must be a string, got {value!r} (expected one of: {choices})")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ConfigError(f"unknown template: {value!r} (expected one of: {choices})") from None


@runtime_checkable
class ContentProvider(Protocol):
    """Source of the static text shown on the splash screen."""

    name: str
    template: Template

    def title(self) -> str:
        """Frame title and logo text."""
        ...

    def meta_line(self) -> str:
        """Small status line above the logo."""
        ...

    def facts(self) -> list[DisplayItem]:
        """Header fact lines."""
        ...

    def sections(self) -> list[Section]:
        """Body sections, in display order."""
        ...

    def footer_hints(self) -> list[DisplayItem]:
        """Key hints shown in the footer."""
        ...


@dataclass(frozen=True)
class StaticContentProvider:
    """ContentProvider backed by immutable tuples, fixed at import time."""
    name: str
    template: Template
    logo: str
    meta: str
    fact_items: tuple[DisplayItem, ...] = ()
    section_items: tuple[Section, ...] = ()
    hints: tuple[DisplayItem, ...] = ()

    def title(self) -> str:
        return self.logo

    def meta_line(self) -> str:
        return self.meta

    def facts(self) -> list[DisplayItem]:
        return list(self.fact_items)

    def sections(self) -> list[Section]:
        return list(self.section_items)

    def footer_hints(self) -> list[DisplayItem]:
        return list(self.hints)
