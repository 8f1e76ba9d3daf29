"""
DHCP message statistics check.
"""

import logging
from typing import Dict

from ..models.request import CheckRequest
from ..models.result import CheckResult, Metric
from ..snmp.client import NetSnmpClient
from ..snmp.constants import DHCP_COUNTERS
from .common import passive_member_result, read_integer

logger = logging.getLogger(__name__)


async def check_dhcp_stat(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """Report the DHCP message counters of the active member."""
    passive = await passive_member_result(request, snmp, "DHCP statistics")
    if passive is not None:
        return passive

    counters: Dict[str, int] = {}
    for name, oid in DHCP_COUNTERS.items():
        value = await read_integer(snmp, oid)
        if value is None:
            return CheckResult.unknown(f"Could not read DHCP {name} counter")
        counters[name] = value

    summary = ", ".join(f"{name}: {value}" for name, value in counters.items())
    metrics = {name: Metric(value) for name, value in counters.items()}
    return CheckResult.ok(f"DHCP messages {summary}", metrics)
