"""
Node service status check.
"""

import logging

from ..models.request import CheckRequest
from ..models.result import CheckResult, Status
from ..snmp.client import NetSnmpClient
from ..snmp.constants import OID_CONSTANTS, SERVICE_IDS
from .common import read_integer

logger = logging.getLogger(__name__)

# ibServiceStatus: working(1), warning(2), failed(3), inactive(4), unknown(5)
SERVICE_STATES = {
    1: Status.OK,
    2: Status.WARNING,
    5: Status.UNKNOWN,
}


async def check_service(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    service = request.sub_argument
    service_id = SERVICE_IDS.get(service or "")
    if service_id is None:
        return CheckResult.unknown(
            f"Unknown service '{service or ''}', use one of: {', '.join(SERVICE_IDS)}"
        )

    code = await read_integer(snmp, f"{OID_CONSTANTS['ibServiceStatus']}.{service_id}")
    description = await snmp.get(f"{OID_CONSTANTS['ibServiceDesc']}.{service_id}")
    if code is None:
        return CheckResult.unknown(f"Could not read status of service {service}: {description}")

    status = SERVICE_STATES.get(code, Status.CRITICAL)
    logger.debug(f"Service {service} ({service_id}) status code {code} -> {status.name}")
    return CheckResult(status, description)
