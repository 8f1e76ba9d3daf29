from typing import Any

import pytest

from check_infoblox.checks import evaluate
from check_infoblox.checks.dns import view_oid
from check_infoblox.models.request import CheckType
from check_infoblox.models.result import Status
from check_infoblox.snmp.constants import DNS_ZONE_COUNTERS, OID_CONSTANTS

ROLE = OID_CONSTANTS["ibHaStatus"]
SERIAL = OID_CONSTANTS["ibSerialNumber"]
ZONES = OID_CONSTANTS["ibBindZoneName"]
EXAMPLE_INDEX = "11.101.120.97.109.112.108.101.46.99.111.109"


def zone_stats(role: str = "Active") -> dict:
    values = {ROLE: role, SERIAL: "SN42"}
    for position, column in enumerate(DNS_ZONE_COUNTERS.values(), start=1):
        values[f"{column}.{EXAMPLE_INDEX}"] = str(position * 100)
    tables = {ZONES: {"7.111.116.104.101.114.46.105.111": "other.io", EXAMPLE_INDEX: "example.com"}}
    return {"values": values, "tables": tables}


def test_dnsstat_reports_all_counters(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp(**zone_stats())
    result = run(evaluate(make_request(CheckType.DNS_STAT, sub_argument="example.com"), snmp))
    assert result.status is Status.OK
    assert result.message == (
        "example.com success: 100, referral: 200, nxrrset: 300, "
        "nxdomain: 400, recursion: 500, failure: 600"
    )
    assert result.perfdata() == (
        "example.com_success=100;;;; example.com_referral=200;;;; example.com_nxrrset=300;;;; "
        "example.com_nxdomain=400;;;; example.com_recursion=500;;;; example.com_failure=600;;;;"
    )


def test_dnsstat_requires_domain(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp(**zone_stats())
    result = run(evaluate(make_request(CheckType.DNS_STAT), snmp))
    assert result.status is Status.UNKNOWN


def test_dnsstat_domain_must_match_exactly(run: Any, fake_snmp: Any, make_request: Any) -> None:
    snmp = fake_snmp(**zone_stats())
    result = run(evaluate(make_request(CheckType.DNS_STAT, sub_argument="example"), snmp))
    assert result.status is Status.WARNING
    assert result.message == "Could not find domain example"


@pytest.mark.parametrize("ignore_unknown, expected", [(False, Status.UNKNOWN), (True, Status.OK)])
def test_dnsstat_passive_member(run: Any, fake_snmp: Any, make_request: Any,
                                ignore_unknown: bool, expected: Status) -> None:
    snmp = fake_snmp(**zone_stats(role="Passive"))
    request = make_request(CheckType.DNS_STAT, sub_argument="example.com", ignore_unknown=ignore_unknown)
    result = run(evaluate(request, snmp))
    assert result.status is expected
    assert "passive grid member" in result.message
    assert result.metrics == {}


@pytest.fixture
def mib_dir(tmp_path: Any) -> str:
    (tmp_path / "IB-DNSONE-MIB.txt").write_text("IB-DNSONE-MIB DEFINITIONS ::= BEGIN\nEND\n")
    return str(tmp_path)


@pytest.mark.parametrize("exists, negate, expected", [
    (True, False, Status.OK),
    (True, True, Status.CRITICAL),
    (False, False, Status.CRITICAL),
    (False, True, Status.OK),
])
def test_dnsview_truth_table(run: Any, fake_snmp: Any, make_request: Any, mib_dir: str,
                             exists: bool, negate: bool, expected: Status) -> None:
    answer = "0.0.127.in-addr.arpa" if exists else "No Such Instance currently exists at this OID"
    snmp = fake_snmp({view_oid("internal"): answer}, mib_dirs=(mib_dir,))
    result = run(evaluate(make_request(CheckType.DNS_VIEW, sub_argument="internal", negate=negate), snmp))
    assert result.status is expected
    assert "internal" in result.message


def test_dnsview_unexpected_answer(run: Any, fake_snmp: Any, make_request: Any, mib_dir: str) -> None:
    snmp = fake_snmp({view_oid("internal"): "No Such Object available on this agent at this OID"},
                     mib_dirs=(mib_dir,))
    result = run(evaluate(make_request(CheckType.DNS_VIEW, sub_argument="internal"), snmp))
    assert result.status is Status.UNKNOWN
    assert "No Such Object" in result.message


def test_dnsview_requires_mib(run: Any, fake_snmp: Any, make_request: Any, tmp_path: Any) -> None:
    snmp = fake_snmp({view_oid("internal"): "0.0.127.in-addr.arpa"}, mib_dirs=(str(tmp_path),))
    result = run(evaluate(make_request(CheckType.DNS_VIEW, sub_argument="internal"), snmp))
    assert result.status is Status.UNKNOWN
    assert "IB-DNSONE-MIB" in result.message


def test_dnsview_requires_view(run: Any, fake_snmp: Any, make_request: Any, mib_dir: str) -> None:
    snmp = fake_snmp(mib_dirs=(mib_dir,))
    result = run(evaluate(make_request(CheckType.DNS_VIEW), snmp))
    assert result.status is Status.UNKNOWN


def test_view_oid() -> None:
    assert view_oid("default") == 'IB-DNSONE-MIB::ibBindZoneName."0.0.127.in-addr.arpa"."default"'
