"""
Errors Module
Exceptions raised while configuring skeleton generation.
"""


class ConfigurationError(ValueError):
    """Raised when a render option is set to an unrecognized value."""
