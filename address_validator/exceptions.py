"""
AddrCheck Exceptions

Author: AddrCheck Project
License: GNU GPL v3
"""


class ConfigurationError(Exception):
    """Raised at setup time when a validator is built with no accepted family."""
    pass


class AddressParseError(ValueError):
    """Raised by the literal parser when a value is not a valid address literal."""
    pass


class ArgumentException(Exception):
    """
    Raised when an argument value fails validation.

    Wraps the structured ValidationFailure so callers that prefer
    exceptions can still branch on failure.kind.
    """

    def __init__(self, failure):
        super().__init__(failure.message)
        self.failure = failure
