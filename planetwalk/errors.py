"""Exceptions raised by Planetwalk."""


class ConfigError(ValueError):
    """Invalid configuration, detected once at startup."""
