"""
LinkScout package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point; keeps the link_scout.cli submodule attribute intact
from link_scout.cli import cli as main_cli  # noqa: E402
