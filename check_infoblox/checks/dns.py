"""
DNS checks: per zone query statistics and DNS view existence.
"""

import logging
from typing import Dict, Optional

from ..models.request import CheckRequest
from ..models.result import CheckResult, Metric, Status
from ..snmp.client import NetSnmpClient, find_mib
from ..snmp.constants import (
    DNS_MIB,
    DNS_VIEW_OID_TEMPLATE,
    DNS_VIEW_ZONE,
    DNS_ZONE_COUNTERS,
    NO_SUCH_INSTANCE,
    OID_CONSTANTS,
)
from .common import passive_member_result, read_integer

logger = logging.getLogger(__name__)


async def find_zone_index(snmp: NetSnmpClient, domain: str) -> Optional[str]:
    """Return the zone statistics table index of `domain`, or None."""
    zones = await snmp.walk(OID_CONSTANTS["ibBindZoneName"])
    for index, name in zones.items():
        if name == domain:
            return index
    logger.info(f"Zone {domain} not among {len(zones)} zones")
    return None


async def check_dns_stat(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """Report the query counters of one zone."""
    domain = request.sub_argument
    if not domain:
        return CheckResult.unknown("Missing domain name, use -a to define the domain")

    passive = await passive_member_result(request, snmp, "DNS statistics")
    if passive is not None:
        return passive

    index = await find_zone_index(snmp, domain)
    if index is None:
        return CheckResult.warning(f"Could not find domain {domain}")

    counters: Dict[str, int] = {}
    for name, column in DNS_ZONE_COUNTERS.items():
        value = await read_integer(snmp, f"{column}.{index}")
        if value is None:
            return CheckResult.unknown(f"Could not read {name} counter of domain {domain}")
        counters[name] = value

    summary = ", ".join(f"{name}: {value}" for name, value in counters.items())
    metrics = {f"{domain}_{name}": Metric(value) for name, value in counters.items()}
    return CheckResult.ok(f"{domain} {summary}", metrics)


def view_oid(view: str) -> str:
    return DNS_VIEW_OID_TEMPLATE.format(zone=DNS_VIEW_ZONE, view=view)


async def check_dns_view(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """
    Check that a DNS view exists (or, negated, that it does not).

    The lookup uses the automatic 0.0.127.in-addr.arpa zone that every view
    carries: if the zone is found in the view, the view exists. Symbolic
    indexes need the vendor MIB, which must be installed locally.
    """
    view = request.sub_argument
    if not view:
        return CheckResult.unknown("Missing view name, use -a to define the view")

    mib_dirs = snmp.mib_dirs
    if find_mib(DNS_MIB, mib_dirs) is None:
        return CheckResult.unknown(
            f"{DNS_MIB} definition not found in {':'.join(mib_dirs)}, required for this check"
        )

    answer = await snmp.get(view_oid(view), mib=DNS_MIB)
    if answer == DNS_VIEW_ZONE:
        exists = True
    elif answer.startswith(NO_SUCH_INSTANCE):
        exists = False
    else:
        return CheckResult.unknown(f"Unexpected answer for DNS view {view}: {answer}")

    if exists:
        message = f"DNS view {view} exists"
        status = Status.CRITICAL if request.negate else Status.OK
    else:
        message = f"DNS view {view} does not exist"
        status = Status.OK if request.negate else Status.CRITICAL
    return CheckResult(status, message)