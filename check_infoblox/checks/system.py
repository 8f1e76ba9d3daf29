"""
Appliance level checks: general information, addresses, utilization,
temperature and HA role.
"""

import logging

from ..models.request import CheckRequest
from ..models.result import CheckResult
from ..snmp.client import NetSnmpClient
from ..snmp.constants import HA_ACTIVE, HA_PASSIVE, OID_CONSTANTS, TEMPERATURE_SERVICE_ID
from ..snmp.parsers import extract_integer
from .common import ha_role, read_integer, usage_result

logger = logging.getLogger(__name__)


async def check_info(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """Describe the appliance: name, model, hardware id, serial and version."""
    system_name = await snmp.get(OID_CONSTANTS["sysName"])
    model = await snmp.get(OID_CONSTANTS["ibHardwareType"])
    hardware_id = await snmp.get(OID_CONSTANTS["ibHardwareId"])
    serial = await snmp.get(OID_CONSTANTS["ibSerialNumber"])
    version = await snmp.get(OID_CONSTANTS["ibNiosVersion"])
    return CheckResult.ok(
        f"System Name: {system_name}, Infoblox Model: {model}, HW ID: {hardware_id}, "
        f"SN: {serial}, Software Version: {version}"
    )


async def check_ip_addresses(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """List the configured addresses, optionally requiring one of them."""
    addresses = list((await snmp.walk(OID_CONSTANTS["ipAdEntAddr"])).values())
    listing = " ".join(addresses)

    expected = request.sub_argument
    if expected and not any(expected in address for address in addresses):
        return CheckResult.warning(
            f"Expected address {expected} not found. IP addresses configured: {listing}"
        )
    return CheckResult.ok(f"Addresses: {listing}")


async def _usage_check(request: CheckRequest, snmp: NetSnmpClient, oid_name: str,
                       metric_name: str) -> CheckResult:
    usage = await read_integer(snmp, OID_CONSTANTS[oid_name])
    if usage is None:
        return CheckResult.unknown("Could not read a numeric usage value")
    return usage_result(request, usage, metric_name, f"Usage at {usage}%", unit="%")


async def check_cpu(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    return await _usage_check(request, snmp, "ibSystemMonitorCpuUsage", "ibloxcpu")


async def check_memory(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    return await _usage_check(request, snmp, "ibSystemMonitorMemUsage", "ibloxmem")


async def check_swap(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    return await _usage_check(request, snmp, "ibSystemMonitorSwapUsage", "ibloxswap")


async def check_temperature(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """Check the CPU temperature reported in the node service table."""
    reading = await snmp.get(f"{OID_CONSTANTS['ibNodeServiceDesc']}.{TEMPERATURE_SERVICE_ID}")
    try:
        temperature = extract_integer(reading)
    except ValueError:
        logger.warning(f"Unexpected temperature reading {reading!r}")
        return CheckResult.unknown(f"Could not read temperature from '{reading}'")
    return usage_result(request, temperature, "temperature", f"Temperature at {temperature} C")


async def check_ha_status(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    """Report the HA role, optionally comparing it to the expected one."""
    role = await ha_role(snmp)
    serial = await snmp.get(OID_CONSTANTS["ibSerialNumber"])
    expected = request.sub_argument

    if not expected:
        return CheckResult.ok(f"This member (SN: {serial}) is {role}")
    if expected not in (HA_ACTIVE, HA_PASSIVE):
        return CheckResult.unknown("Please use Active or Passive as additional argument")
    if role != expected:
        return CheckResult.warning(f"This member (SN: {serial}) is {role} but expected {expected}")
    return CheckResult.ok(f"This member (SN: {serial}) is {role}")
