"""Built-in content providers and the provider registry."""

from __future__ import annotations

from vt_splash.content.model import (
    ContentProvider,
    DisplayItem,
    Section,
    StaticContentProvider,
    Template,
)
from vt_splash.errors import ConfigError

LOGO = "> VT Code"
META_LINE = "x-ai/grok-4-fast:free · medium"

FOOTER_HINTS = (
    DisplayItem("enter to open"),
    DisplayItem("q / esc to close"),
)

WELCOME = StaticContentProvider(
    name="welcome",
    template=Template.SINGLE_COLUMN_FACTS,
    logo=LOGO,
    meta=META_LINE,
    fact_items=(
        DisplayItem("Workspace trust", "full auto"),
        DisplayItem("Tools policy", "Allow 6 · Prompt 12 · Deny 0 (.vtcode/tool-policy.json)"),
        DisplayItem("Workspace languages", "JavaScript:4, Python:2, Rust:176"),
        DisplayItem("Human-in-the-loop safeguards", "enabled"),
        DisplayItem("MCP (Model Context Protocol)", "enabled (time, context7, sequential-thinking)"),
    ),
    section_items=(
        Section("Project context summary", (
            DisplayItem("Project", "vtcode v0.15.9"),
        )),
        Section("Key guidelines", (
            DisplayItem(
                "Workspace Structure",
                "vtcode-core/ (library) + src/ (binary) with modular tools system",
            ),
            DisplayItem(
                "Core Modules",
                "llm/ (provider abstraction), tools/ (modular tool system), config/ (TOML-based settings)",
            ),
        )),
        Section("Usage tips", (
            DisplayItem("Describe your current coding goal or ask for a quick status overview."),
            DisplayItem("Reference AGENTS.md guidelines when proposing changes."),
            DisplayItem("Prefer asking for targeted file reads or diffs before editing."),
        )),
        Section("Suggested Next Actions", (
            DisplayItem("Review the highlighted guidelines and share the task you want to tackle."),
            DisplayItem("Ask for a workspace tour if you need more context."),
        )),
    ),
    hints=FOOTER_HINTS,
)

FEATURES = StaticContentProvider(
    name="features",
    template=Template.TWO_COLUMN_FEATURES,
    logo=LOGO,
    meta=META_LINE,
    fact_items=(
        DisplayItem("Project", "vtcode v0.15.9"),
        DisplayItem("Workspace trust", "full auto"),
    ),
    section_items=(
        Section("Highlights", (
            DisplayItem("Multi-provider LLM support with a single provider abstraction."),
            DisplayItem("Modular tool system with per-tool allow / prompt / deny policies."),
            DisplayItem("MCP integrations for time, context7 and sequential-thinking."),
            DisplayItem("TOML-based configuration with workspace-level overrides."),
        )),
        Section("Suggested Next Actions", (
            DisplayItem("Describe your current coding goal or ask for a quick status overview."),
            DisplayItem("Review the highlighted guidelines and share the task you want to tackle."),
            DisplayItem("Ask for a workspace tour if you need more context."),
        )),
    ),
    hints=FOOTER_HINTS,
)

_PROVIDERS: dict[str, ContentProvider] = {
    WELCOME.name: WELCOME,
    FEATURES.name: FEATURES,
}

DEFAULT_PROVIDER = WELCOME.name


def available_providers() -> list[ContentProvider]:
    """All registered providers, in registration order."""
    return list(_PROVIDERS.values())


def get_provider(name: str) -> ContentProvider:
    try:
        return _PROVIDERS[name]
    except KeyError:
        choices = ", ".join(_PROVIDERS)
        raise ConfigError(f"unknown content provider: {name!r} (expected one of: {choices})") from None
