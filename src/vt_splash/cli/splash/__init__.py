"""Splash screen application."""

from vt_splash.cli.splash.app import LoopState, SplashApp, run_splash
from vt_splash.cli.splash.screen import render_screen

__all__ = ["LoopState", "SplashApp", "run_splash", "render_screen"]
