#!/usr/bin/env python3
"""
SNMP client for executing snmpget and snmpwalk commands.
"""

import asyncio
import logging
import os
from typing import Dict, List, Optional, Sequence

from .constants import (
    DEFAULT_MIB_DIRS,
    DEFAULT_SNMP_PORT,
    DEFAULT_SNMP_RETRIES,
    DEFAULT_SNMP_TIMEOUT,
    DEFAULT_SNMP_VERSION,
)
from .parsers import parse_snmp_value, parse_snmp_walk_response

# Configure logging
logger = logging.getLogger(__name__)

SNMP_TOOLS = ("snmpget", "snmpwalk")


class SnmpError(Exception):
    """Raised when an SNMP request could not be completed."""

    def __init__(self, oid: str, detail: str):
        super().__init__(f"{oid}: {detail}" if detail else oid)
        self.oid = oid
        self.detail = detail


async def check_snmp_tools_installed() -> Optional[str]:
    """
    Check if net-snmp tools are installed.

    Returns:
        Optional[str]: Name of the first missing tool, None if all are present
    """
    for tool in SNMP_TOOLS:
        try:
            proc = await asyncio.create_subprocess_exec(
                tool, "--version",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            await proc.communicate()
        except FileNotFoundError:
            logger.error(f"{tool} not found. Please install the net-snmp package.")
            return tool
        if proc.returncode != 0:
            logger.error(f"{tool} --version exited with {proc.returncode}")
            return tool
    return None


def find_mib(name: str, mib_dirs: Sequence[str]) -> Optional[str]:
    """Return the path of the MIB definition file `name`, or None."""
    for directory in mib_dirs:
        for filename in (name, f"{name}.txt", f"{name}.my"):
            path = os.path.join(directory, filename)
            if os.path.isfile(path):
                return path
    return None


class NetSnmpClient:
    """
    Read-only SNMP v2c access to one agent through the net-snmp tools.

    Every request is a separate snmpget/snmpwalk process. Timeouts and
    retries are left to net-snmp (-t/-r); failures raise SnmpError.
    """

    def __init__(self, host: str, community: str, port: int = DEFAULT_SNMP_PORT,
                 timeout: int = DEFAULT_SNMP_TIMEOUT, retries: int = DEFAULT_SNMP_RETRIES,
                 version: str = DEFAULT_SNMP_VERSION, mib_dirs: Sequence[str] = DEFAULT_MIB_DIRS):
        self.host = host
        self.community = community
        self.port = port
        self.timeout = timeout
        self.retries = retries
        self.version = version
        self.mib_dirs = list(mib_dirs)

    def _command(self, tool: str, oid: str, output_flags: List[str], mib: Optional[str] = None) -> List[str]:
        cmd = [
            tool, f"-v{self.version}",
            "-c", self.community,
            "-r", str(self.retries),
            "-t", str(self.timeout),
            "-On", "-Oe", *output_flags,
        ]
        if mib:
            cmd += ["-m", f"+{mib}"]
            if self.mib_dirs:
                cmd += ["-M", "+" + ":".join(self.mib_dirs)]
        cmd += [f"{self.host}:{self.port}", oid]
        return cmd

    async def _run(self, cmd: List[str], oid: str) -> str:
        logger.debug(f"Running {' '.join(cmd[:2] + cmd[4:])}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            logger.warning(f"Error executing {cmd[0]} for {self.host} OID {oid}: {e}")
            raise SnmpError(oid, str(e)) from e

        if proc.returncode != 0:
            error = stderr.decode(errors="replace").strip()
            logger.warning(f"SNMP error for {self.host} OID {oid}: {error}")
            raise SnmpError(oid, error)

        return stdout.decode(errors="replace").strip()

    async def get(self, oid: str, mib: Optional[str] = None) -> str:
        """
        Perform SNMP GET operation for a single OID using snmpget command.

        "No Such Object"/"No Such Instance" answers are returned as text,
        callers decide whether they are an error.

        Args:
            oid: OID to query, numeric or MIB::name when `mib` is given
            mib: Optional MIB module to load for symbolic OIDs

        Returns:
            str: Value without type tag and quoting
        """
        output = await self._run(self._command("snmpget", oid, ["-Oqv"], mib), oid)
        value = parse_snmp_value(output)
        logger.debug(f"GET {oid} -> {value!r}")
        return value

    async def walk(self, oid: str) -> Dict[str, str]:
        """
        Perform SNMP WALK operation using snmpwalk command.

        Args:
            oid: Base OID to walk

        Returns:
            Dict[str, str]: Table index (OID below `oid`) to value, in agent order
        """
        output = await self._run(self._command("snmpwalk", oid, ["-Oq"]), oid)
        values = parse_snmp_walk_response(output, oid)
        logger.debug(f"WALK {oid} -> {len(values)} entries")
        return values
