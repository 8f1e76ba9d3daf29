import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from check_infoblox.models.request import CheckRequest, CheckType
from check_infoblox.snmp.client import SnmpError
from check_infoblox.snmp.constants import OID_CONSTANTS


class FakeSnmpClient:
    """Serves canned answers; unknown OIDs fail like an unreachable agent."""

    def __init__(self, values: Optional[Dict[str, Any]] = None,
                 tables: Optional[Dict[str, Any]] = None,
                 mib_dirs: Tuple[str, ...] = ()) -> None:
        self.values: Dict[str, Any] = {OID_CONSTANTS["sysName"]: "ib-grid-01"}
        self.values.update(values or {})
        self.tables: Dict[str, Any] = dict(tables or {})
        self.mib_dirs = list(mib_dirs)
        self.calls: List[Tuple[str, str]] = []

    async def get(self, oid: str, mib: Optional[str] = None) -> str:
        self.calls.append(("get", oid))
        if oid not in self.values:
            raise SnmpError(oid, "Timeout: No Response from 192.0.2.10")
        value = self.values[oid]
        if isinstance(value, Exception):
            raise value
        return value

    async def walk(self, oid: str) -> Dict[str, str]:
        self.calls.append(("walk", oid))
        if oid not in self.tables:
            raise SnmpError(oid, "Timeout: No Response from 192.0.2.10")
        table = self.tables[oid]
        if isinstance(table, list):
            return {str(i + 1): value for i, value in enumerate(table)}
        return dict(table)


@pytest.fixture
def fake_snmp():
    """Factory for FakeSnmpClient instances."""
    return FakeSnmpClient


@pytest.fixture
def make_request():
    def _make(check_type: CheckType, **kwargs: Any) -> CheckRequest:
        return CheckRequest(host="192.0.2.10", check_type=check_type, **kwargs)
    return _make


@pytest.fixture
def run():
    """Run a coroutine to completion."""
    return asyncio.run
