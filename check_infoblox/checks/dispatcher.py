"""
Runs one check: validates the request, verifies the agent answers and
hands over to the routine registered for the check type.
"""

import logging
from typing import Awaitable, Callable, Dict

from ..models.request import CheckRequest, CheckType
from ..models.result import CheckResult
from ..snmp.client import NetSnmpClient, SnmpError
from ..snmp.constants import OID_CONSTANTS
from .dhcp import check_dhcp_stat
from .dns import check_dns_stat, check_dns_view
from .replication import check_replication
from .service import check_service
from .system import (
    check_cpu,
    check_ha_status,
    check_info,
    check_ip_addresses,
    check_memory,
    check_swap,
    check_temperature,
)

logger = logging.getLogger(__name__)

CheckRoutine = Callable[[CheckRequest, NetSnmpClient], Awaitable[CheckResult]]

CHECKS: Dict[CheckType, CheckRoutine] = {
    CheckType.INFO: check_info,
    CheckType.IP_ADDRESSES: check_ip_addresses,
    CheckType.CPU: check_cpu,
    CheckType.MEMORY: check_memory,
    CheckType.SWAP: check_swap,
    CheckType.REPLICATION: check_replication,
    CheckType.HA_STATUS: check_ha_status,
    CheckType.DNS_STAT: check_dns_stat,
    CheckType.TEMPERATURE: check_temperature,
    CheckType.DHCP_STAT: check_dhcp_stat,
    CheckType.SERVICE: check_service,
    CheckType.DNS_VIEW: check_dns_view,
}


async def evaluate(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """
    Evaluate a check request against the agent behind `snmp`.

    Expected failures never raise: an invalid request, an unreachable agent
    or a failed read all end in an UNKNOWN result. The first failed read
    aborts the check.

    The request is validated here even though the command line front end
    already did so before looking for the net-snmp tools: callers other
    than `main` hand requests straight to this function.
    """
    invalid = request.validate()
    if invalid is not None:
        return invalid

    try:
        system_name = await snmp.get(OID_CONSTANTS["sysName"])
    except SnmpError as e:
        logger.warning(f"Connection check against {request.host} failed: {e}")
        return CheckResult.unknown("SNMP connection failed")
    logger.debug(f"Connected to {system_name}, running {request.check_type.value} check")

    routine = CHECKS[request.check_type]
    try:
        return await routine(request, snmp)
    except SnmpError as e:
        return CheckResult.unknown(f"SNMP request failed: {e}")
