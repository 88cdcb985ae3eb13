"""Custom exceptions for the action items package."""


class ActionItemsError(Exception):
    """Base exception for action items errors"""
    pass


class ConfigError(ActionItemsError):
    """Raised when configuration values are invalid"""
    pass
