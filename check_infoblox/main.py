#!/usr/bin/env python3
"""
Entry point for the Infoblox check plugin.
Handles argument parsing, prints the single Nagios output line and exits
with the matching plugin state.
"""

import sys
import asyncio
import argparse
import logging
from typing import List, Optional

from .checks import evaluate
from .config import ConfigError, load_config
from .models.request import CheckRequest, CheckType
from .models.result import CheckResult, Status
from .snmp.client import NetSnmpClient, check_snmp_tools_installed
from .snmp.constants import DEFAULT_SNMP_VERSION
from .util.logging import setup_logging

logger = logging.getLogger(__name__)

USAGE = "check_infoblox -H host -V 2c -C community -t type [-a argument] [-w warning] [-c critical] [-i] [-n]"

HELP_TEXT = f"""
check_infoblox - monitor Infoblox appliances over SNMP

Usage: {USAGE}

Options:
------------
-H Hostname
-V SNMP Version to use (currently only 2c is supported)
-C SNMP Community (default: public)
-t Type to check
-a Additional arguments for certain checks
-w Warning Threshold (optional)
-c Critical Threshold (optional)
-i Ignore Unknown Status (for 'replication', 'dnsstat' and 'dhcpstat' on a passive member)
-n Negate result (for 'dnsview')
-p SNMP port (default: 161)
-T SNMP timeout in seconds
-f Configuration file
-v Verbose logging to stderr
-h This help text

Check Types:
------------
info -> Display general information about this appliance
ip -> Display configured ip addresses of this appliance (additional argument possible to check for a certain address)
cpu -> Check CPU utilization (thresholds possible)
mem -> Check Memory utilization (thresholds possible)
swap -> Check Swap utilization (thresholds possible)
temp -> Check CPU temperature (thresholds possible)
replication -> Check if replication between Infoblox appliances is working
grid -> Check if appliance is Active or Passive in grid (additional argument possible)
dnsstat -> Check DNS statistics of a domain (additional argument required)
dhcpstat -> Check DHCP statistics
service -> Check the state of a service (additional argument required)
dnsview -> Check if a DNS view exists (additional argument required)

Additional Arguments:
------------
example.com (domain name) for dnsstat check
(Active|Passive) for grid check
ip.add.re.ss for ip check
(dhcp|dns|ntp|tftp|http-file-dist|ftp|bloxtools-move|bloxtools) for service check
viewname for dnsview check
"""


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that leaves reporting and the exit code to the plugin."""

    def error(self, message):
        raise UsageError(message)


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = PluginArgumentParser(prog="check_infoblox", usage=USAGE, add_help=False)
    parser.add_argument('-H', dest='host', help='Hostname')
    parser.add_argument('-V', dest='version', default=DEFAULT_SNMP_VERSION, help='SNMP version')
    parser.add_argument('-C', dest='community', help='SNMP community (overrides config file)')
    parser.add_argument('-t', dest='check_type', choices=[t.value for t in CheckType], help='Type to check')
    parser.add_argument('-a', dest='argument', help='Additional argument for certain checks')
    parser.add_argument('-w', dest='warning', type=int, help='Warning threshold')
    parser.add_argument('-c', dest='critical', type=int, help='Critical threshold')
    parser.add_argument('-i', dest='ignore_unknown', action='store_true', help='Ignore unknown status')
    parser.add_argument('-n', dest='negate', action='store_true', help='Negate result')
    parser.add_argument('-p', dest='port', type=int, help='SNMP port (overrides config file)')
    parser.add_argument('-T', dest='timeout', type=int, help='SNMP timeout in seconds (overrides config file)')
    parser.add_argument('-f', dest='config_file', help='Configuration file')
    parser.add_argument('-v', dest='verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('-h', '--help', dest='help', action='store_true', help='This help text')
    return parser.parse_args(argv)


def report(result: CheckResult, label: str = "") -> int:
    """Print the plugin output line and return the exit code."""
    print(result.render(label))
    return result.exit_code


async def main(argv: Optional[List[str]] = None) -> int:
    """Main function, returns the plugin exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(HELP_TEXT)
        return int(Status.UNKNOWN)

    try:
        args = parse_arguments(argv)
    except UsageError as e:
        return report(CheckResult.unknown(f"{e}. Use -h to check out help."))

    if args.help:
        print(HELP_TEXT)
        return int(Status.UNKNOWN)

    try:
        config = load_config(args.config_file)
    except ConfigError as e:
        return report(CheckResult.unknown(str(e)))

    # Override config with command line arguments if provided
    if args.community:
        config.community = args.community
    if args.port:
        config.port = args.port
    if args.timeout:
        config.timeout = args.timeout

    try:
        setup_logging(args.verbose, config.log_file)
    except OSError as e:
        return report(CheckResult.unknown(f"Cannot open log file {config.log_file}: {e.strerror}"))

    if not args.host or not args.check_type:
        return report(CheckResult.unknown("Missing required option. Use -h to check out help."))

    request = CheckRequest(
        host=args.host,
        check_type=CheckType(args.check_type),
        community=config.community,
        sub_argument=args.argument,
        warning=args.warning,
        critical=args.critical,
        ignore_unknown=args.ignore_unknown,
        negate=args.negate,
        snmp_version=args.version,
    )
    label = request.check_type.label

    # Checked before the tool lookup so a bad -V never depends on the host setup
    invalid = request.validate()
    if invalid is not None:
        return report(invalid, label)

    # Check for SNMP tools
    missing = await check_snmp_tools_installed()
    if missing:
        return report(CheckResult.unknown(
            f"{missing} does not exist. Please verify if command exists in PATH"
        ), label)

    snmp = NetSnmpClient(
        request.host,
        request.community,
        port=config.port,
        timeout=config.timeout,
        retries=config.retries,
        version=request.snmp_version,
        mib_dirs=config.mib_dirs,
    )

    try:
        result = await evaluate(request, snmp)
    except Exception as e:
        logger.exception(f"Unexpected error during {request.check_type.value} check")
        result = CheckResult.unknown(f"Unexpected error: {e}")

    return report(result, label)


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
