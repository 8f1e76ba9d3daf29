#!/usr/bin/env python3
"""
Constants for Infoblox SNMP OIDs and other SNMP-related settings.
"""

# Infoblox enterprise subtrees (IB-PLATFORMONE-MIB, IB-DNSONE-MIB, IB-DHCPONE-MIB)
IB_PLATFORM = "1.3.6.1.4.1.7779.3.1.1.2.1"
IB_DNS_ZONE_STATS = "1.3.6.1.4.1.7779.3.1.1.3.1.1.1"
IB_DHCP_STATS = "1.3.6.1.4.1.7779.3.1.1.4.1.3"

# OID Constants for SNMP queries
OID_CONSTANTS = {
    # System information (MIB-II)
    "sysName": "1.3.6.1.2.1.1.5.0",
    "ipAdEntAddr": "1.3.6.1.2.1.4.20.1.1",

    # Appliance information
    "ibHardwareType": f"{IB_PLATFORM}.4.0",
    "ibHardwareId": f"{IB_PLATFORM}.5.0",
    "ibSerialNumber": f"{IB_PLATFORM}.6.0",
    "ibNiosVersion": f"{IB_PLATFORM}.7.0",

    # System utilization in percent
    "ibSystemMonitorCpuUsage": f"{IB_PLATFORM}.8.1.1.0",
    "ibSystemMonitorMemUsage": f"{IB_PLATFORM}.8.2.1.0",
    "ibSystemMonitorSwapUsage": f"{IB_PLATFORM}.8.3.1.0",

    # HA role of the queried member ("Active" or "Passive")
    "ibHaStatus": f"{IB_PLATFORM}.13.0",

    # Grid replication table, walked column by column
    "ibMemberReplicationName": f"{IB_PLATFORM}.2.1.1",
    "ibMemberReplicationStatus": f"{IB_PLATFORM}.2.1.2",
    "ibMemberReplicationLastSync": f"{IB_PLATFORM}.2.1.4",

    # Member service table (dhcp, dns, ntp, ...), indexed by service id
    "ibServiceStatus": f"{IB_PLATFORM}.9.1.2",
    "ibServiceDesc": f"{IB_PLATFORM}.9.1.3",

    # Node service table (hardware sensors), indexed by node service id
    "ibNodeServiceDesc": f"{IB_PLATFORM}.10.1.3",

    # Per zone DNS statistics, indexed by zone
    "ibBindZoneName": f"{IB_DNS_ZONE_STATS}.1",
}

# Counter columns of the zone statistics table
DNS_ZONE_COUNTERS = {
    "success": f"{IB_DNS_ZONE_STATS}.2",
    "referral": f"{IB_DNS_ZONE_STATS}.3",
    "nxrrset": f"{IB_DNS_ZONE_STATS}.4",
    "nxdomain": f"{IB_DNS_ZONE_STATS}.5",
    "recursion": f"{IB_DNS_ZONE_STATS}.6",
    "failure": f"{IB_DNS_ZONE_STATS}.7",
}

# DHCP message counters, all scalars
DHCP_COUNTERS = {
    "discovers": f"{IB_DHCP_STATS}.1.0",
    "requests": f"{IB_DHCP_STATS}.2.0",
    "releases": f"{IB_DHCP_STATS}.3.0",
    "offers": f"{IB_DHCP_STATS}.4.0",
    "acks": f"{IB_DHCP_STATS}.5.0",
    "nacks": f"{IB_DHCP_STATS}.6.0",
    "declines": f"{IB_DHCP_STATS}.7.0",
    "informs": f"{IB_DHCP_STATS}.8.0",
    "others": f"{IB_DHCP_STATS}.9.0",
}

# ibServiceName values of the member services that can be checked
SERVICE_IDS = {
    "dhcp": 1,
    "dns": 2,
    "ntp": 3,
    "tftp": 4,
    "http-file-dist": 5,
    "ftp": 6,
    "bloxtools-move": 7,
    "bloxtools": 8,
}

# ibNodeServiceName value of the CPU temperature sensor
TEMPERATURE_SERVICE_ID = 39

# DNS view lookup: every view carries the automatic localhost reverse zone
DNS_MIB = "IB-DNSONE-MIB"
DNS_VIEW_ZONE = "0.0.127.in-addr.arpa"
DNS_VIEW_OID_TEMPLATE = 'IB-DNSONE-MIB::ibBindZoneName."{zone}"."{view}"'
NO_SUCH_INSTANCE = "No Such Instance"

HA_ACTIVE = "Active"
HA_PASSIVE = "Passive"
REPLICATION_OFFLINE = "Offline"

# Default SNMP settings
DEFAULT_SNMP_PORT = 161
DEFAULT_SNMP_COMMUNITY = "public"
DEFAULT_SNMP_VERSION = "2c"
DEFAULT_SNMP_TIMEOUT = 2
DEFAULT_SNMP_RETRIES = 1
DEFAULT_MIB_DIRS = [
    "/usr/share/snmp/mibs",
    "/usr/local/share/snmp/mibs",
]
SUPPORTED_SNMP_VERSIONS = ("2c",)
