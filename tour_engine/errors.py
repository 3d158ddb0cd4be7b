"""Errors raised before a search is allowed to start."""


class ConfigurationError(ValueError):
    """Invalid board size, strategy token, time budget or menu option."""
