"""Subcommand modules for timeparts: calendar, formats and moments."""
