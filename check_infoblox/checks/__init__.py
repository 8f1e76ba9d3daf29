"""
Check routines for Infoblox appliances.
Each check type has one coroutine taking the request and an SNMP client;
`evaluate` picks the routine and turns SNMP failures into UNKNOWN results.
"""

from .dispatcher import CHECKS, evaluate
from .replication import ReplicationMember

__all__ = [
    'CHECKS',
    'evaluate',
    'ReplicationMember'
]
