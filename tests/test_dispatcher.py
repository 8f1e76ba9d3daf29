from typing import Any

import pytest

from check_infoblox.checks import CHECKS, evaluate
from check_infoblox.models.request import CheckType
from check_infoblox.models.result import Status
from check_infoblox.snmp.client import SnmpError
from check_infoblox.snmp.constants import OID_CONSTANTS


def test_every_check_type_has_a_routine() -> None:
    assert set(CHECKS) == set(CheckType)


def test_unsupported_version_reads_nothing(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp()
    result = run(evaluate(make_request(CheckType.CPU, snmp_version="1"), snmp))
    assert result.status is Status.UNKNOWN
    assert snmp.calls == []


def test_connection_failure(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp({OID_CONSTANTS["sysName"]: SnmpError(OID_CONSTANTS["sysName"], "Timeout")})
    result = run(evaluate(make_request(CheckType.INFO), snmp))
    assert result.status is Status.UNKNOWN
    assert result.message == "SNMP connection failed"
    assert len(snmp.calls) == 1


@pytest.mark.parametrize("check_type", list(CheckType))
def test_read_failure_is_always_unknown(run: Any, fake_snmp: Any, make_request: Any,
                                        check_type: CheckType) -> None:
    # Only sysName answers; the first check specific read fails
    snmp = fake_snmp()
    request = make_request(check_type, sub_argument={
        CheckType.SERVICE: "dns",
        CheckType.DNS_STAT: "example.com",
    }.get(check_type))
    result = run(evaluate(request, snmp))
    assert result.status is Status.UNKNOWN


@pytest.mark.parametrize("check_type", list(CheckType))
def test_status_is_canonical(run: Any, fake_snmp: Any, make_request: Any, check_type: CheckType) -> None:
    snmp = fake_snmp({oid: "1" for oid in OID_CONSTANTS.values()},
                     tables={oid: ["1"] for oid in OID_CONSTANTS.values()})
    result = run(evaluate(make_request(check_type, sub_argument="x", warning=1, critical=2), snmp))
    assert result.status in set(Status)
    assert result.exit_code in (0, 1, 2, 3)


def test_evaluation_is_idempotent(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp({OID_CONSTANTS["ibSystemMonitorCpuUsage"]: "75"})
    request = make_request(CheckType.CPU, warning=70, critical=90)
    first = run(evaluate(request, snmp))
    second = run(evaluate(request, snmp))
    assert first == second
