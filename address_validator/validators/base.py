"""
AddrCheck Base Argument Value Validator

Base class for all argument value validators.

Provides:
- Abstract validate() returning a structured outcome
- validate_argument_value() raising ArgumentException on failure
- argparse type adapter via as_argparse_type()

Author: AddrCheck Project
License: GNU GPL v3
"""

import argparse
from abc import ABC, abstractmethod

from ..exceptions import ArgumentException
from ..models import ValidationOutcome


class ArgumentValueValidator(ABC):
    """
    Base class for validators bound to an argument definition.

    Implementations must be immutable after construction so one instance
    can serve concurrent parses.
    """

    @abstractmethod
    def validate(self, argument, value: str) -> ValidationOutcome:
        """
        Check a single value supplied for argument.

        Args:
            argument: ArgumentRef, identifier string, or framework argument
            value: Raw textual value

        Returns:
            Accepted or ValidationFailure
        """
        pass

    def validate_argument_value(self, argument, value: str):
        """
        Exception-raising form of validate().

        Raises:
            ArgumentException: If the value is rejected
        """
        outcome = self.validate(argument, value)
        if not outcome:
            raise ArgumentException(outcome)
        return outcome

    def as_argparse_type(self, argument=None):
        """
        Adapt this validator for use as an argparse ``type=`` callable.

        The returned callable passes accepted values through unchanged and
        raises argparse.ArgumentTypeError with the failure message otherwise.

        Example:
            >>> parser.add_argument('--bind', type=validator.as_argparse_type('--bind'))
        """
        def _check(value: str) -> str:
            outcome = self.validate(argument, value)
            if not outcome:
                raise argparse.ArgumentTypeError(outcome.message)
            return value

        return _check
