"""Themux — browse and apply Termux color themes."""

__version__ = "0.1.0"
