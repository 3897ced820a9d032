"""A lumberjack arcade game: chop the tree, dodge the branches, beat the clock."""

__version__ = "0.1.0"
__all__ = ["actors", "app", "assets", "branches", "flight", "game"]