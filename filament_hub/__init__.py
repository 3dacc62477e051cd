"""Filament Hub - filament profile catalog and editor."""

__version__ = "0.1.0"
