"""Typer CLI application with command groups."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="vt-splash",
        help="Show the VT Code welcome screen in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.command()
    def show(
        provider: Annotated[Optional[str], typer.Option("--provider", "-p", help="Content provider name")] = None,
        template: Annotated[Optional[str], typer.Option("--template", "-t", help="single-column-facts or two-column-features")] = None,
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="JSON config file")] = None,
    ) -> None:
        """Open the interactive splash screen (Enter, Esc or q to close)."""
        from vt_splash.cli.splash.app import run_splash
        from vt_splash.config import resolve_config
        from vt_splash.errors import SplashError
        from vt_splash.log import setup_logging

        try:
            settings = resolve_config(provider=provider, template=template, config_path=config)
            setup_logging(settings.log_level, settings.log_file)
            run_splash(config=settings)
        except SplashError as exc:
            # Terminal is already restored by the time this is printed
            err_console.print(f"[red]{type(exc).__name__}: {exc}[/]")
            raise typer.Exit(1)

    @app.command()
    def snapshot(
        provider: Annotated[Optional[str], typer.Option("--provider", "-p", help="Content provider name")] = None,
        template: Annotated[Optional[str], typer.Option("--template", "-t", help="single-column-facts or two-column-features")] = None,
        width: Annotated[int, typer.Option("--width", "-w", min=0, help="Frame width in columns")] = 80,
        height: Annotated[int, typer.Option("--height", "-H", min=0, help="Frame height in rows")] = 24,
        ansi: Annotated[bool, typer.Option("--ansi", help="Keep colors and attributes")] = False,
    ) -> None:
        """Render a single frame to stdout without taking over the terminal."""
        from vt_splash.cli.core.screen import ScreenBuffer
        from vt_splash.cli.splash.screen import render_screen
        from vt_splash.config import resolve_config
        from vt_splash.content.providers import get_provider
        from vt_splash.errors import SplashError

        try:
            settings = resolve_config(provider=provider, template=template)
            buffer = ScreenBuffer(width, height)
            render_screen(buffer, get_provider(settings.provider), settings.resolve_template(), settings)
        except SplashError as exc:
            err_console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        if ansi:
            print('\n'.join(buffer.to_ansi_lines()))
        else:
            print(buffer.to_text())

    @app.command()
    def providers() -> None:
        """List the available content providers."""
        from vt_splash.content.providers import available_providers

        table = Table(title="Content providers")
        table.add_column("Name", style="bold cyan")
        table.add_column("Template")
        table.add_column("Sections", justify="right")
        for item in available_providers():
            table.add_row(item.name, item.template.value, str(len(item.sections())))
        console.print(table)

    return app
