"""
Grid replication check.

The member name, status and last sync columns of the replication table
carry no join key of their own, so rows are rebuilt by position.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..models.request import CheckRequest
from ..models.result import CheckResult
from ..snmp.client import NetSnmpClient
from ..snmp.constants import OID_CONSTANTS, REPLICATION_OFFLINE
from .common import passive_member_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplicationMember:
    """One row of the grid replication table."""
    name: str
    status: str
    last_sync: str

    @property
    def offline(self) -> bool:
        return self.status == REPLICATION_OFFLINE


class ReplicationTableError(ValueError):
    """Raised when the replication columns cannot be lined up row by row."""


def zip_members(names: List[str], statuses: List[str], last_syncs: List[str]) -> List[ReplicationMember]:
    """Correlate the three replication columns by index."""
    if not len(names) == len(statuses) == len(last_syncs):
        raise ReplicationTableError(
            f"Replication tables are inconsistent: {len(statuses)} statuses, "
            f"{len(names)} names, {len(last_syncs)} sync times"
        )
    return [
        ReplicationMember(name, status, last_sync)
        for name, status, last_sync in zip(names, statuses, last_syncs)
    ]


async def read_members(snmp: NetSnmpClient) -> List[ReplicationMember]:
    """Walk the status, name and last sync columns, always in that order."""
    statuses = list((await snmp.walk(OID_CONSTANTS["ibMemberReplicationStatus"])).values())
    names = list((await snmp.walk(OID_CONSTANTS["ibMemberReplicationName"])).values())
    last_syncs = list((await snmp.walk(OID_CONSTANTS["ibMemberReplicationLastSync"])).values())
    return zip_members(names, statuses, last_syncs)


async def check_replication(request: CheckRequest, snmp: NetSnmpClient) -> CheckResult:
    passive = await passive_member_result(request, snmp, "replication")
    if passive is not None:
        return passive

    try:
        members = await read_members(snmp)
    except ReplicationTableError as e:
        logger.warning(str(e))
        return CheckResult.unknown(str(e))

    failed = [member for member in members if member.offline]
    logger.debug(f"{len(failed)} of {len(members)} members offline")

    if not failed:
        return CheckResult.ok("All members replicating")

    names = ", ".join(member.name for member in failed)
    last_syncs = ", ".join(member.last_sync for member in failed)
    return CheckResult.critical(
        f"Member(s) {names} failed to replicate. Last successful sync at {last_syncs}"
    )
