"""
AddrCheck Argument Value Validators

Validators that plug into an argument parser to check individual values.

Author: AddrCheck Project
License: GNU GPL v3
"""

from .base import ArgumentValueValidator
from .ip_address import IPAddressArgumentValueValidator

__all__ = ['ArgumentValueValidator', 'IPAddressArgumentValueValidator']
