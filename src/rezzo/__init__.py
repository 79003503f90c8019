"""Rezzo - rules engine for a two-player train-and-step strategy game."""

__version__ = "0.1.0"
