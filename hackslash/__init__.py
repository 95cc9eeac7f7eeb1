"""Game state for a top-down hack-and-slash RPG: stats, items, abilities, characters and interface state."""

__version__ = "0.1.0"