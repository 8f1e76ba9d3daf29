#!/usr/bin/env python3
"""
Parsers for net-snmp command output.
"""

import re
from typing import Dict

# Type prefix printed by net-snmp when quick print (-Oq) is not honoured
TYPE_PREFIX_RE = re.compile(
    r'^(STRING|INTEGER|Counter32|Counter64|Gauge32|Unsigned32|Timeticks|IpAddress|OID|Hex-STRING):\s*'
)
# Start of a record in -On output: a numeric OID, then the value
OID_LINE_RE = re.compile(r'^\.\d+(?:\.\d+)*(?:\s|$)')
INTEGER_TOKEN_RE = re.compile(r'(?<![A-Za-z0-9_.])[-+]?\d+')


def parse_snmp_value(value_str: str) -> str:
    """
    Normalise a single SNMP value as printed by snmpget/snmpwalk.

    Surrounding whitespace, a leading type tag and the quotes around
    string values are removed. The result is always a string; callers
    convert it to a number when the check needs one.

    Args:
        value_str: SNMP response value as string

    Returns:
        str: Value without type tag and quoting
    """
    value = value_str.strip()
    if not value or value == "STRING:":
        return ""

    value = TYPE_PREFIX_RE.sub('', value, count=1)

    # String value (quoted)
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]

    return value


def parse_snmp_walk_response(output: str, base_oid: str) -> Dict[str, str]:
    """
    Parse the output of `snmpwalk -On -Oq` into an ordered dictionary.

    Each record starts with a numeric OID, for example
    `.1.3.6.1.2.1.4.20.1.1.10.0.0.1 10.0.0.1`. The key is the part of the
    OID below `base_oid` (the table index), the value is the normalised
    value. A string value holding line breaks is printed over several
    lines; lines that do not start with an OID belong to the record above
    and are joined back with newlines. Records outside the walked subtree,
    such as the "No Such Object" answer for an empty subtree, are skipped.

    Args:
        output: Output string from snmpwalk command
        base_oid: OID the walk was started at

    Returns:
        Dict[str, str]: Table index to value, in agent order
    """
    result = {}
    prefix = "." + base_oid.strip(".") + "."
    index = None
    lines = []

    def flush():
        if index is not None:
            result[index] = parse_snmp_value("\n".join(lines))

    for line in output.split('\n'):
        line = line.rstrip('\r')
        if not OID_LINE_RE.match(line):
            # Continuation of a multi-line value
            if index is not None:
                lines.append(line)
            continue

        flush()
        parts = line.strip().split(None, 1)
        full_oid = parts[0]
        if full_oid.startswith(prefix):
            index = full_oid[len(prefix):]
            lines = [parts[1] if len(parts) == 2 else ""]
        else:
            index = None
            lines = []

    flush()
    return result


def parse_integer(value: str) -> int:
    """Parse an exact integer SNMP value, raising ValueError otherwise."""
    value = value.strip()
    if not re.fullmatch(r'-?\d+', value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def extract_integer(value: str) -> int:
    """
    Extract the leading integer from a sensor reading such as
    "CPU_TEMP: +36.00 C". Raises ValueError when there is none.
    """
    match = INTEGER_TOKEN_RE.search(value)
    if not match:
        raise ValueError(f"no numeric value in {value!r}")
    return int(match.group(0))
