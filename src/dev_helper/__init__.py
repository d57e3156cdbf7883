"""Personal command-line helper: git shortcuts, a to-do list, coding time and AI questions."""

__version__ = "0.3.0"
