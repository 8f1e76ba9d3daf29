"""
Nagios plugin checking Infoblox DNS/DHCP appliances over SNMP.
"""

__version__ = "1.0.0"
