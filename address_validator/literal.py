"""
AddrCheck Address Literal Parser

Strict literal parsing of IPv4 and IPv6 addresses.

Built on the standard ipaddress module, which only parses literals and
never consults DNS or any other resolver. Zone-id suffixes
("fe80::1%eth0") are refused as well, so the result is always a plain
address of one family.

Author: AddrCheck Project
License: GNU GPL v3
"""

import ipaddress

from .exceptions import AddressParseError
from .models import AddressFamily


def parse_literal(value: str) -> AddressFamily:
    """
    Parse value as an IPv4 or IPv6 address literal.

    Args:
        value: Candidate address literal

    Returns:
        AddressFamily of the parsed address

    Raises:
        AddressParseError: If value is not a valid literal

    Example:
        >>> parse_literal("192.168.1.1")
        <AddressFamily.IPV4: 'IPv4'>
    """
    if '%' in value:
        raise AddressParseError(f"Zone identifiers are not accepted: {value!r}")

    try:
        address = ipaddress.ip_address(value)
    except ValueError as e:
        raise AddressParseError(str(e)) from e

    if isinstance(address, ipaddress.IPv6Address):
        return AddressFamily.IPV6
    return AddressFamily.IPV4
