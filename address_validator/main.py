#!/usr/bin/env python3
"""
AddrCheck - IP Address Argument Validation

Command-line front end for the IP address argument value validator.

Usage:
    addrcheck 192.168.1.1 ::1            # Accept both families
    addrcheck --ipv4-only 10.0.0.1       # Reject IPv6 literals
    addrcheck --ipv6-only fe80::1        # Reject IPv4 literals
    addrcheck --describe                 # Print the active policy

Exit status:
    0  every value was accepted
    1  at least one value was rejected
    2  invalid configuration (no address family accepted)

Author: AddrCheck Project
License: GNU GPL v3
"""

import argparse
import logging
import sys
from typing import List, Optional

from address_validator.config import get_config
from address_validator.exceptions import ConfigurationError
from address_validator.models import ArgumentRef
from address_validator.utils.logging import setup_logging
from address_validator.validators.ip_address import IPAddressArgumentValueValidator

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2

VALUE_ARGUMENT = ArgumentRef('VALUE')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='addrcheck',
        description='Validate IPv4/IPv6 address literals without resolving hostnames'
    )
    parser.add_argument('values', nargs='*', metavar='VALUE', help='Address literal(s) to validate')

    family = parser.add_mutually_exclusive_group()
    family.add_argument('--ipv4-only', action='store_true', help='Reject IPv6 addresses')
    family.add_argument('--ipv6-only', action='store_true', help='Reject IPv4 addresses')

    parser.add_argument('--describe', action='store_true', help='Print the validator policy and exit')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only report rejected values')
    return parser


def create_validator(args) -> IPAddressArgumentValueValidator:
    """
    Build the validator from configuration, with CLI flags taking precedence.

    Raises:
        ConfigurationError: If no address family ends up accepted
    """
    if args.ipv4_only:
        return IPAddressArgumentValueValidator(accept_ipv4=True, accept_ipv6=False)
    if args.ipv6_only:
        return IPAddressArgumentValueValidator(accept_ipv4=False, accept_ipv6=True)

    config = get_config()
    return IPAddressArgumentValueValidator.from_config(config.validator_config())


def check_values(validator: IPAddressArgumentValueValidator, values: List[str], quiet: bool = False) -> int:
    """
    Validate each value, printing one result line per value.

    Returns:
        Number of rejected values
    """
    logger = logging.getLogger(__name__)
    rejected = 0

    for value in values:
        outcome = validator.validate(VALUE_ARGUMENT, value)
        if outcome:
            logger.debug(f"Accepted {value!r} as {outcome.family.value}")
            if not quiet:
                print(f"OK {value} ({outcome.family.value})")
        else:
            rejected += 1
            logger.debug(f"Rejected {value!r}: {outcome.kind.value}")
            print(f"INVALID {value}: {outcome.message}")

    return rejected


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the addrcheck console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = getattr(logging, config.log_level, logging.INFO)
    setup_logging(level=log_level, log_file=config.log_file)
    logger = logging.getLogger(__name__)

    try:
        validator = create_validator(args)
    except ConfigurationError as e:
        logger.error(f"Invalid validator configuration: {e}")
        return EXIT_CONFIG_ERROR

    logger.debug(f"Using {validator.describe()}")

    if args.describe:
        print(validator.describe())
        return EXIT_OK

    if not args.values:
        parser.error("at least one VALUE is required")

    rejected = check_values(validator, args.values, quiet=args.quiet)
    if rejected:
        logger.debug(f"{rejected} of {len(args.values)} values rejected")
        return EXIT_INVALID
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
