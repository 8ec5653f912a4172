"""Result models, report formatters and registry helpers for configuration policy checks."""

__version__ = "0.1.0"