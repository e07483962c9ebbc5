"""
AddrCheck IP Address Argument Value Validator

Checks that an argument value is an IPv4 and/or IPv6 address literal.

Validation stages (each one short-circuits on failure):
1. Family classification: a colon means IPv6, else a period means IPv4
2. Character pre-check for the classified family
3. Structural check by the literal parser
4. Family acceptance policy

Stage 2 guarantees that only address-shaped strings reach stage 3, and
stage 3 uses a parser that never resolves names anyway.

Author: AddrCheck Project
License: GNU GPL v3
"""

from typing import Optional

from ..exceptions import AddressParseError
from ..literal import parse_literal
from ..models import (
    Accepted,
    AddressFamily,
    FailureKind,
    ValidationFailure,
    ValidationOutcome,
    ValidatorConfig,
    get_identifier_string,
)
from .base import ArgumentValueValidator


IPV4_CHARACTERS = frozenset('0123456789.')
IPV6_CHARACTERS = frozenset('0123456789abcdefABCDEF:.')


def _first_illegal_character(value: str, allowed: frozenset) -> Optional[str]:
    for c in value:
        if c not in allowed:
            return c
    return None


class IPAddressArgumentValueValidator(ArgumentValueValidator):
    """
    Validator for IP address literal arguments.

    Accepts both families by default. At least one of accept_ipv4 and
    accept_ipv6 must be true; otherwise ConfigurationError is raised.

    Usage:
        validator = IPAddressArgumentValueValidator(accept_ipv6=False)
        outcome = validator.validate('--listen-address', '10.0.0.1')
        if not outcome:
            print(outcome.message)
    """

    def __init__(self, accept_ipv4: bool = True, accept_ipv6: bool = True):
        """
        Args:
            accept_ipv4: Whether IPv4 addresses will be accepted
            accept_ipv6: Whether IPv6 addresses will be accepted

        Raises:
            ConfigurationError: If both flags are False
        """
        self._config = ValidatorConfig(accept_ipv4=accept_ipv4, accept_ipv6=accept_ipv6)

    @classmethod
    def from_config(cls, config: ValidatorConfig) -> 'IPAddressArgumentValueValidator':
        """Build a validator from an existing ValidatorConfig."""
        return cls(accept_ipv4=config.accept_ipv4, accept_ipv6=config.accept_ipv6)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def accept_ipv4_addresses(self) -> bool:
        return self._config.accept_ipv4

    @property
    def accept_ipv6_addresses(self) -> bool:
        return self._config.accept_ipv6

    def validate(self, argument, value: str) -> ValidationOutcome:
        argument_id = get_identifier_string(argument)

        if ':' in value:
            family, allowed = AddressFamily.IPV6, IPV6_CHARACTERS
            illegal_kind = FailureKind.ILLEGAL_IPV6_CHARACTER
        elif '.' in value:
            family, allowed = AddressFamily.IPV4, IPV4_CHARACTERS
            illegal_kind = FailureKind.ILLEGAL_IPV4_CHARACTER
        else:
            return ValidationFailure(value, argument_id, FailureKind.MALFORMED_ADDRESS)

        bad_char = _first_illegal_character(value, allowed)
        if bad_char is not None:
            return ValidationFailure(value, argument_id, illegal_kind, bad_char)

        try:
            parsed_family = parse_literal(value)
        except AddressParseError:
            return ValidationFailure(value, argument_id, FailureKind.MALFORMED_ADDRESS)

        # Lexical classification and parsed family must agree
        if parsed_family is not family:
            return ValidationFailure(value, argument_id, FailureKind.MALFORMED_ADDRESS)

        if family is AddressFamily.IPV6 and not self._config.accept_ipv6:
            return ValidationFailure(value, argument_id, FailureKind.IPV6_NOT_ACCEPTED)
        if family is AddressFamily.IPV4 and not self._config.accept_ipv4:
            return ValidationFailure(value, argument_id, FailureKind.IPV4_NOT_ACCEPTED)

        return Accepted(value, family)

    def describe(self) -> str:
        """Diagnostic text exposing both configuration flags."""
        return (
            f"IPAddressArgumentValueValidator("
            f"acceptIPv4Addresses={self._config.accept_ipv4}, "
            f"acceptIPv6Addresses={self._config.accept_ipv6})"
        )

    def __str__(self) -> str:
        return self.describe()

    __repr__ = __str__
