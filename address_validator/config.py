"""
AddrCheck Configuration Module

Default validator policy loaded from an INI-style config.conf file.

Configuration precedence (highest to lowest):
1. Environment variables (ADDRCHECK_*)
2. config.conf file, [validator] and [logging] sections
3. Default values (both families accepted, INFO logging)

Config file search locations (first found wins):
1. Path specified in ADDRCHECK_CONFIG_FILE environment variable
2. /etc/addrcheck/config.conf (system-wide)
3. ~/.config/addrcheck/config.conf (user-specific)
4. ./config.conf (current directory)
5. Built-in defaults (if no config file found)

Author: AddrCheck Project
License: GNU GPL v3
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator
from typing import Optional
from pathlib import Path
import configparser
import logging
import os
import warnings

from .exceptions import ConfigurationError
from .models import ValidatorConfig
from .validators.ip_address import IPAddressArgumentValueValidator
from . import messages


ENV_PREFIX = 'ADDRCHECK_'
CONFIG_SECTIONS = ('validator', 'logging')


def find_config_file() -> Optional[Path]:
    """
    Search for config.conf in standard locations.

    Returns:
        Path to config file if found, None otherwise
    """
    env_config = os.environ.get(f'{ENV_PREFIX}CONFIG_FILE')
    if env_config:
        path = Path(env_config)
        if path.exists():
            return path
        warnings.warn(f"{ENV_PREFIX}CONFIG_FILE={env_config} does not exist")

    search_paths = [
        Path('/etc/addrcheck/config.conf'),
        Path.home() / '.config' / 'addrcheck' / 'config.conf',
        Path('config.conf'),
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_config_file(config_file: Optional[Path] = None) -> dict:
    """
    Load configuration from config.conf file.

    Args:
        config_file: Explicit file to read; searched for when omitted

    Returns:
        Dictionary keyed by ADDRCHECK_* names
    """
    logger = logging.getLogger(__name__)

    if config_file is None:
        config_file = find_config_file()
    if not config_file:
        logger.debug("No config.conf file found, using environment and defaults")
        return {}

    parser = configparser.ConfigParser()

    try:
        parser.read(config_file)
    except configparser.Error as e:
        logger.warning(f"Failed to parse {config_file}: {e}. Using defaults.")
        return {}

    logger.debug(f"Loaded configuration from: {config_file}")

    config = {}
    for section in CONFIG_SECTIONS:
        if parser.has_section(section):
            for key, value in parser.items(section):
                # Strip inline comments (anything after #)
                value = value.split('#')[0].strip()
                config[f'{ENV_PREFIX}{key.upper()}'] = value

    return config


def _parse_bool(value: str, field_name: str = "field") -> bool:
    """
    Parse boolean value from string with validation.

    Raises:
        ValueError: If value is not a valid boolean string
    """
    value_lower = value.lower().strip()
    if value_lower in ('true', '1', 'yes', 'on'):
        return True
    elif value_lower in ('false', '0', 'no', 'off'):
        return False
    else:
        raise ValueError(
            f"Invalid boolean value for {field_name}: '{value}'. "
            f"Use: true/false, 1/0, yes/no, on/off"
        )


class AddressCheckConfig(BaseSettings):
    """
    Application configuration with validation.

    Attributes:
        accept_ipv4: Accept IPv4 literals by default
        accept_ipv6: Accept IPv6 literals by default
        log_level: Logging level name for the CLI
        log_file: Optional rotating log file for the CLI
    """
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra='ignore')

    accept_ipv4: bool = True
    accept_ipv6: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None
    config_file: Optional[str] = None

    @model_validator(mode='after')
    def load_from_config_file(self):
        """
        Overlay config.conf values for fields not already set.

        Fields given explicitly or through ADDRCHECK_* environment
        variables are in model_fields_set and keep their value.
        """
        logger = logging.getLogger(__name__)
        config_file = Path(self.config_file) if self.config_file else None
        config_dict = load_config_file(config_file)
        explicit = self.model_fields_set

        for field in ('accept_ipv4', 'accept_ipv6'):
            value_str = config_dict.get(f'{ENV_PREFIX}{field.upper()}')
            if field not in explicit and value_str is not None:
                try:
                    setattr(self, field, _parse_bool(value_str, field))
                except ValueError as e:
                    logger.warning(str(e))

        for field in ('log_level', 'log_file'):
            value_str = config_dict.get(f'{ENV_PREFIX}{field.upper()}')
            if field not in explicit and value_str:
                setattr(self, field, value_str)

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            logger.warning(f"Unknown log level '{self.log_level}', using INFO")
            self.log_level = "INFO"

        if not (self.accept_ipv4 or self.accept_ipv6):
            raise ConfigurationError(messages.ERR_IP_VALIDATOR_NO_FAMILY)

        return self

    def validator_config(self) -> ValidatorConfig:
        """Family policy as an immutable ValidatorConfig."""
        return ValidatorConfig(accept_ipv4=self.accept_ipv4, accept_ipv6=self.accept_ipv6)


def build_validator(config: Optional[AddressCheckConfig] = None):
    """
    Create an IPAddressArgumentValueValidator from configuration.

    Args:
        config: Configuration to use; the global instance when omitted
    """
    if config is None:
        config = get_config()
    return IPAddressArgumentValueValidator.from_config(config.validator_config())


# Global configuration instance (singleton pattern)
_config_instance = None


def get_config() -> AddressCheckConfig:
    """
    Get global configuration instance with lazy initialization.

    Raises:
        ConfigurationError: If the configured policy disables both families
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AddressCheckConfig()
    return _config_instance


def reset_config():
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
