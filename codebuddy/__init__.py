"""Screen state, theming and report generation for an interactive code review tool."""

__version__ = "0.4.20"