"""Future You vs Present You: an hourly habit game."""

__version__ = "1.0.4"
