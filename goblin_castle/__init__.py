"""Goblin Castle: a small terminal roguelike with generated levels and field of view."""

__version__ = "0.1.0.dev0"