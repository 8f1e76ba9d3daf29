"""
SNMP module for Infoblox appliance checks.
This package provides the net-snmp based client, parsers for its output,
and the Infoblox OID constants.
"""

from .client import NetSnmpClient, SnmpError, check_snmp_tools_installed, find_mib
from .constants import OID_CONSTANTS
from .parsers import parse_snmp_value, parse_snmp_walk_response

__all__ = [
    'NetSnmpClient',
    'SnmpError',
    'check_snmp_tools_installed',
    'find_mib',
    'OID_CONSTANTS',
    'parse_snmp_value',
    'parse_snmp_walk_response'
]
