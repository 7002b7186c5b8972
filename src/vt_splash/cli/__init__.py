"""Command line interface and terminal UI for vt-splash."""
