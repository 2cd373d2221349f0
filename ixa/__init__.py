"""Building blocks for agent-based models: plan queue, random streams, CSV reports and progress bars."""

__version__ = "0.2.0"

__all__ = ["plan", "progress", "random", "report"]