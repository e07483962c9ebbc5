"""
AddrCheck Data Models

Core data structures used by the address validator.

This module defines:
- ValidatorConfig: Immutable family acceptance policy
- ValidationFailure / Accepted: Outcome of a single validation call
- ArgumentRef: Identifier of the argument being validated
- Enums: AddressFamily, FailureKind

Author: AddrCheck Project
License: GNU GPL v3
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import ConfigurationError
from . import messages


class AddressFamily(Enum):
    """Address families recognised by the validator."""
    IPV4 = "IPv4"
    IPV6 = "IPv6"


class FailureKind(Enum):
    """
    Reasons a value can be rejected.

    Values:
        MALFORMED_ADDRESS: No separator, or the literal parser rejected it
        ILLEGAL_IPV6_CHARACTER: Non hex/colon/period char in a colon-bearing value
        ILLEGAL_IPV4_CHARACTER: Non digit/period char in a dot-only value
        IPV4_NOT_ACCEPTED: Valid IPv4 literal, IPv4 disabled
        IPV6_NOT_ACCEPTED: Valid IPv6 literal, IPv6 disabled
    """
    MALFORMED_ADDRESS = "malformed_address"
    ILLEGAL_IPV6_CHARACTER = "illegal_ipv6_character"
    ILLEGAL_IPV4_CHARACTER = "illegal_ipv4_character"
    IPV4_NOT_ACCEPTED = "ipv4_not_accepted"
    IPV6_NOT_ACCEPTED = "ipv6_not_accepted"


_MESSAGE_TEMPLATES = {
    FailureKind.MALFORMED_ADDRESS: messages.ERR_IP_VALIDATOR_MALFORMED,
    FailureKind.ILLEGAL_IPV6_CHARACTER: messages.ERR_IP_VALIDATOR_ILLEGAL_IPV6_CHAR,
    FailureKind.ILLEGAL_IPV4_CHARACTER: messages.ERR_IP_VALIDATOR_ILLEGAL_IPV4_CHAR,
    FailureKind.IPV4_NOT_ACCEPTED: messages.ERR_IP_VALIDATOR_IPV4_NOT_ACCEPTED,
    FailureKind.IPV6_NOT_ACCEPTED: messages.ERR_IP_VALIDATOR_IPV6_NOT_ACCEPTED,
}


class ValidatorConfig(BaseModel):
    """
    Family acceptance policy for an address validator.

    Frozen after construction, so a single instance can be shared by
    every thread validating values for the owning argument.

    Attributes:
        accept_ipv4: Whether IPv4 literals are accepted
        accept_ipv6: Whether IPv6 literals are accepted
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    accept_ipv4: bool = True
    accept_ipv6: bool = True

    @model_validator(mode='after')
    def _require_one_family(self):
        if not (self.accept_ipv4 or self.accept_ipv6):
            raise ConfigurationError(messages.ERR_IP_VALIDATOR_NO_FAMILY)
        return self


@dataclass(frozen=True)
class ArgumentRef:
    """Minimal handle on an argument; only its identifier is used."""
    identifier_string: str

    def __str__(self) -> str:
        return self.identifier_string


def get_identifier_string(argument) -> str:
    """
    Resolve the identifier used in messages for an argument.

    Accepts a plain string, or any object exposing ``identifier_string``
    (ArgumentRef, or a framework's own argument type).
    """
    if argument is None:
        return "value"
    if isinstance(argument, str):
        return argument
    identifier = getattr(argument, 'identifier_string', None)
    if identifier is None:
        return str(argument)
    return identifier() if callable(identifier) else str(identifier)


@dataclass(frozen=True)
class Accepted:
    """Successful validation, with the family the value parsed as."""
    value: str
    family: AddressFamily

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """
    Rejected value.

    Attributes:
        value: The offending value, verbatim
        argument_id: Identifier of the argument it was supplied for
        kind: FailureKind describing why it was rejected
        character: Offending character for the ILLEGAL_* kinds, else None
    """
    value: str
    argument_id: str
    kind: FailureKind
    character: Optional[str] = None

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """User-facing message for this failure."""
        return _MESSAGE_TEMPLATES[self.kind].format(
            value=self.value,
            argument=self.argument_id,
            char=self.character,
        )

    def __str__(self) -> str:
        return self.message


ValidationOutcome = Union[Accepted, ValidationFailure]
