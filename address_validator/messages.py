"""
AddrCheck Message Catalog

User-facing message templates for validation failures.

Templates use str.format() fields:
- {value}: the rejected value
- {argument}: identifier of the argument it was supplied for
- {char}: the offending character (character-level failures only)

Author: AddrCheck Project
License: GNU GPL v3
"""

ERR_IP_VALIDATOR_NO_FAMILY = (
    "One or both of the accept_ipv4 and accept_ipv6 arguments must have "
    "a value of 'true'."
)

ERR_IP_VALIDATOR_MALFORMED = (
    "Value '{value}' provided for argument {argument} cannot be parsed as "
    "an IPv4 or IPv6 address."
)

ERR_IP_VALIDATOR_ILLEGAL_IPV6_CHAR = (
    "Value '{value}' provided for argument {argument} contains illegal "
    "IPv6 address character '{char}'."
)

ERR_IP_VALIDATOR_ILLEGAL_IPV4_CHAR = (
    "Value '{value}' provided for argument {argument} contains illegal "
    "IPv4 address character '{char}'."
)

ERR_IP_VALIDATOR_IPV4_NOT_ACCEPTED = (
    "Value '{value}' provided for argument {argument} is an IPv4 address, "
    "but IPv4 addresses are not accepted."
)

ERR_IP_VALIDATOR_IPV6_NOT_ACCEPTED = (
    "Value '{value}' provided for argument {argument} is an IPv6 address, "
    "but IPv6 addresses are not accepted."
)
