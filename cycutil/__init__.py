"""Ring queue, time-windowed statistics, size formatting and command-line option parsing."""

__version__ = "0.1.0"
__all__ = ["ring_queue", "statistics", "string_util", "options", "simple_opt"]