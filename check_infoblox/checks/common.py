"""
Helpers shared by several check routines.
"""

import logging
from typing import Optional

from ..models.request import CheckRequest
from ..models.result import CheckResult, Metric, Status
from ..snmp.client import NetSnmpClient
from ..snmp.constants import HA_ACTIVE, OID_CONSTANTS
from ..snmp.parsers import parse_integer

logger = logging.getLogger(__name__)


def threshold_status(value: int, warning: Optional[int], critical: Optional[int]) -> Status:
    """
    Compare a value against optional thresholds, higher is worse.

    Critical is tested first; a value equal to a threshold trips it. An unset
    threshold never matches.
    """
    if critical is not None and value >= critical:
        return Status.CRITICAL
    if warning is not None and value >= warning:
        return Status.WARNING
    return Status.OK


def usage_result(request: CheckRequest, value: int, metric_name: str, message: str,
                 unit: str = "") -> CheckResult:
    """Build the result of a threshold based check (cpu, mem, swap, temp)."""
    metric = Metric(value, request.warning, request.critical, unit)
    if request.has_thresholds:
        status = threshold_status(value, request.warning, request.critical)
    else:
        status = Status.OK
    return CheckResult(status, message, {metric_name: metric})


async def read_integer(snmp: NetSnmpClient, oid: str) -> Optional[int]:
    """GET an integer value, None when the agent answers with something else."""
    raw = await snmp.get(oid)
    try:
        return parse_integer(raw)
    except ValueError:
        logger.warning(f"Non numeric value {raw!r} for OID {oid}")
        return None


async def ha_role(snmp: NetSnmpClient) -> str:
    return await snmp.get(OID_CONSTANTS["ibHaStatus"])


async def passive_member_result(request: CheckRequest, snmp: NetSnmpClient,
                                what: str) -> Optional[CheckResult]:
    """
    Return the result for a passive HA member, or None when it is Active.

    Statistics and replication state are only available on the active
    member. The result is UNKNOWN, or OK with the same message when the
    request asks to ignore unknown states.
    """
    role = await ha_role(snmp)
    if role == HA_ACTIVE:
        return None

    serial = await snmp.get(OID_CONSTANTS["ibSerialNumber"])
    logger.info(f"Member {serial} is {role!r}, {what} not available")
    message = (f"This system (SN: {serial}) is a passive grid member. "
               f"Cannot verify {what}. Try with HA IP address?")
    status = Status.OK if request.ignore_unknown else Status.UNKNOWN
    return CheckResult(status, message)
