"""
Tests for configuration loading.

Precedence: explicit/environment > config.conf > defaults.

Author: AddrCheck Project
License: GNU GPL v3
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from address_validator import config as config_module
from address_validator.config import (
    AddressCheckConfig,
    _parse_bool,
    build_validator,
    get_config,
    load_config_file,
    reset_config,
)
from address_validator.exceptions import ConfigurationError


def _clean_environ():
    """Current environment without any ADDRCHECK_* variables."""
    return {k: v for k, v in os.environ.items() if not k.startswith('ADDRCHECK_')}


class ConfigTestCase(unittest.TestCase):

    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmpdir.name)
        self.missing = str(self.tmp / 'missing.conf')
        env_patch = patch.dict(os.environ, _clean_environ(), clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        self.addCleanup(self._tmpdir.cleanup)
        self.addCleanup(reset_config)
        reset_config()

    def write_config(self, text: str) -> str:
        path = self.tmp / 'config.conf'
        path.write_text(text)
        return str(path)


class TestParseBool(unittest.TestCase):

    def test_valid_values(self):
        for value in ['true', 'TRUE', '1', 'yes', 'on', ' On ']:
            self.assertTrue(_parse_bool(value))
        for value in ['false', '0', 'no', 'off']:
            self.assertFalse(_parse_bool(value))

    def test_invalid_value(self):
        with self.assertRaises(ValueError):
            _parse_bool('maybe', 'accept_ipv4')


class TestLoadConfigFile(ConfigTestCase):

    def test_reads_known_sections(self):
        path = self.write_config(
            "[validator]\n"
            "accept_ipv6 = false  # IPv4 only\n"
            "[logging]\n"
            "log_level = debug\n"
            "[other]\n"
            "ignored = 1\n"
        )
        values = load_config_file(Path(path))
        self.assertEqual(values['ADDRCHECK_ACCEPT_IPV6'], 'false')
        self.assertEqual(values['ADDRCHECK_LOG_LEVEL'], 'debug')
        self.assertNotIn('ADDRCHECK_IGNORED', values)

    def test_unparseable_file_returns_empty(self):
        path = self.write_config("accept_ipv4 = true\n")
        with self.assertLogs('address_validator.config', level='WARNING'):
            self.assertEqual(load_config_file(Path(path)), {})


class TestAddressCheckConfig(ConfigTestCase):

    def test_defaults(self):
        config = AddressCheckConfig(config_file=self.missing)
        self.assertTrue(config.accept_ipv4)
        self.assertTrue(config.accept_ipv6)
        self.assertEqual(config.log_level, 'INFO')
        self.assertIsNone(config.log_file)

    def test_file_values_applied(self):
        path = self.write_config(
            "[validator]\naccept_ipv6 = no\n[logging]\nlog_level = debug\n"
        )
        config = AddressCheckConfig(config_file=path)
        self.assertTrue(config.accept_ipv4)
        self.assertFalse(config.accept_ipv6)
        self.assertEqual(config.log_level, 'DEBUG')

    def test_environment_overrides_file(self):
        path = self.write_config("[validator]\naccept_ipv6 = false\n")
        with patch.dict(os.environ, {'ADDRCHECK_ACCEPT_IPV6': 'true'}):
            config = AddressCheckConfig(config_file=path)
        self.assertTrue(config.accept_ipv6)

    def test_explicit_value_overrides_file(self):
        path = self.write_config("[validator]\naccept_ipv4 = false\n")
        config = AddressCheckConfig(config_file=path, accept_ipv4=True)
        self.assertTrue(config.accept_ipv4)

    def test_invalid_boolean_in_file_is_ignored(self):
        path = self.write_config("[validator]\naccept_ipv4 = sometimes\n")
        with self.assertLogs('address_validator.config', level='WARNING'):
            config = AddressCheckConfig(config_file=path)
        self.assertTrue(config.accept_ipv4)

    def test_unknown_log_level_falls_back(self):
        path = self.write_config("[logging]\nlog_level = chatty\n")
        with self.assertLogs('address_validator.config', level='WARNING'):
            config = AddressCheckConfig(config_file=path)
        self.assertEqual(config.log_level, 'INFO')

    def test_both_families_disabled_rejected(self):
        path = self.write_config("[validator]\naccept_ipv4 = off\naccept_ipv6 = off\n")
        with self.assertRaises(ConfigurationError):
            AddressCheckConfig(config_file=path)

    def test_validator_config(self):
        config = AddressCheckConfig(config_file=self.missing, accept_ipv4=False)
        policy = config.validator_config()
        self.assertFalse(policy.accept_ipv4)
        self.assertTrue(policy.accept_ipv6)


class TestGlobalConfig(ConfigTestCase):

    def test_singleton_and_reset(self):
        path = self.write_config("[validator]\naccept_ipv4 = false\n")
        with patch.dict(os.environ, {'ADDRCHECK_CONFIG_FILE': path}):
            first = get_config()
            self.assertIs(get_config(), first)
            self.assertFalse(first.accept_ipv4)

            reset_config()
            self.assertIsNone(config_module._config_instance)
            self.assertIsNot(get_config(), first)

    def test_build_validator(self):
        config = AddressCheckConfig(config_file=self.missing, accept_ipv6=False)
        validator = build_validator(config)
        self.assertTrue(validator.accept_ipv4_addresses)
        self.assertFalse(validator.accept_ipv6_addresses)

    def test_build_validator_uses_global_config(self):
        with patch.dict(os.environ, {'ADDRCHECK_CONFIG_FILE': self.missing}):
            validator = build_validator()
        self.assertTrue(validator.accept_ipv4_addresses)


if __name__ == '__main__':
    unittest.main()
