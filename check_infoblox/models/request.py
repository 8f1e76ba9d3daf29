from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..snmp.constants import DEFAULT_SNMP_COMMUNITY, DEFAULT_SNMP_VERSION, SUPPORTED_SNMP_VERSIONS
from .result import CheckResult


class CheckType(Enum):
    """Available check types, keyed by their command line name."""
    INFO = "info"
    IP_ADDRESSES = "ip"
    CPU = "cpu"
    MEMORY = "mem"
    SWAP = "swap"
    REPLICATION = "replication"
    HA_STATUS = "grid"
    DNS_STAT = "dnsstat"
    TEMPERATURE = "temp"
    DHCP_STAT = "dhcpstat"
    SERVICE = "service"
    DNS_VIEW = "dnsview"

    @property
    def label(self) -> str:
        """Prefix of the plugin output line."""
        return CHECK_LABELS[self]


CHECK_LABELS = {
    CheckType.INFO: "INFO",
    CheckType.IP_ADDRESSES: "IP",
    CheckType.CPU: "CPU",
    CheckType.MEMORY: "MEMORY",
    CheckType.SWAP: "SWAP",
    CheckType.REPLICATION: "REPLICATION",
    CheckType.HA_STATUS: "GRID STATUS",
    CheckType.DNS_STAT: "DNS STATS",
    CheckType.TEMPERATURE: "TEMPERATURE",
    CheckType.DHCP_STAT: "DHCP STATS",
    CheckType.SERVICE: "SERVICE",
    CheckType.DNS_VIEW: "DNS VIEW",
}


@dataclass(frozen=True)
class CheckRequest:
    """Everything one plugin invocation needs to know."""
    host: str
    check_type: CheckType
    community: str = DEFAULT_SNMP_COMMUNITY
    sub_argument: Optional[str] = None
    warning: Optional[int] = None
    critical: Optional[int] = None
    ignore_unknown: bool = False
    negate: bool = False
    snmp_version: str = DEFAULT_SNMP_VERSION

    @property
    def has_thresholds(self) -> bool:
        return self.warning is not None or self.critical is not None

    def validate(self) -> Optional[CheckResult]:
        """Return an UNKNOWN result when the request cannot be evaluated."""
        if not self.host or not self.community:
            return CheckResult.unknown("Missing required option. Use -h to check out help.")
        if self.snmp_version not in SUPPORTED_SNMP_VERSIONS:
            return CheckResult.unknown("Sorry, only snmp version 2c allowed for now")
        return None
