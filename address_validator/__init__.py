"""
AddrCheck - IP Address Argument Validation

Validates command-line argument values as IPv4 and/or IPv6 address
literals, without ever resolving hostnames.

Author: AddrCheck Project
License: GNU GPL v3
"""

from .exceptions import ArgumentException, AddressParseError, ConfigurationError
from .literal import parse_literal
from .models import (
    Accepted,
    AddressFamily,
    ArgumentRef,
    FailureKind,
    ValidationFailure,
    ValidationOutcome,
    ValidatorConfig,
)
from .validators import ArgumentValueValidator, IPAddressArgumentValueValidator

__version__ = "1.0.0"

__all__ = [
    'Accepted',
    'AddressFamily',
    'AddressParseError',
    'ArgumentException',
    'ArgumentRef',
    'ArgumentValueValidator',
    'ConfigurationError',
    'FailureKind',
    'IPAddressArgumentValueValidator',
    'ValidationFailure',
    'ValidationOutcome',
    'ValidatorConfig',
    'parse_literal',
]
