"""Map analysis, game settings and launch helpers for StarCraft II bots."""

__version__ = "0.1.0"