"""
Tests for the address literal parser.

The parser must never consult a resolver, whatever it is given.

Author: AddrCheck Project
License: GNU GPL v3
"""

import unittest
from unittest.mock import patch

from address_validator import AddressFamily, AddressParseError, parse_literal


def _no_resolution(*args, **kwargs):
    raise AssertionError("name resolution attempted")


class TestParseLiteral(unittest.TestCase):

    def test_families(self):
        self.assertEqual(parse_literal('192.168.1.1'), AddressFamily.IPV4)
        self.assertEqual(parse_literal('::1'), AddressFamily.IPV6)
        self.assertEqual(parse_literal('::ffff:10.0.0.1'), AddressFamily.IPV6)

    def test_rejects_invalid_literals(self):
        for value in ['192.168.1.999', '1.2.3', '1::2::3', '', 'abc']:
            with self.assertRaises(AddressParseError):
                parse_literal(value)

    def test_rejects_zone_identifier(self):
        with self.assertRaises(AddressParseError):
            parse_literal('fe80::1%eth0')

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_literal('not-an-address')

    def test_hostnames_never_resolved(self):
        with patch('socket.getaddrinfo', side_effect=_no_resolution), \
                patch('socket.gethostbyname', side_effect=_no_resolution):
            for value in ['localhost', 'example.com', 'ip6-localhost']:
                with self.assertRaises(AddressParseError):
                    parse_literal(value)


if __name__ == '__main__':
    unittest.main()
