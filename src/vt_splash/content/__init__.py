"""Static display content: items, sections and the providers that supply them."""

from vt_splash.content.model import (
    ContentProvider,
    DisplayItem,
    Section,
    StaticContentProvider,
    Template,
)
from vt_splash.content.providers import (
    DEFAULT_PROVIDER,
    available_providers,
    get_provider,
)

__all__ = [
    "ContentProvider",
    "DisplayItem",
    "Section",
    "StaticContentProvider",
    "Template",
    "DEFAULT_PROVIDER",
    "available_providers",
    "get_provider",
]
