"""Traffic history files, INI settings, skin descriptions and history view figures for a network traffic monitor."""

__version__ = "0.1.0"

__all__ = ["ini", "simplexml", "history", "scroll", "history_view", "skin_layout", "skin"]