from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Optional


class Status(IntEnum):
    """Nagios plugin states; the value is the process exit code."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


def _threshold(value: Optional[int]) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Metric:
    """One performance data entry."""
    value: int
    warning: Optional[int] = None
    critical: Optional[int] = None
    unit: str = ""

    def to_perfdata(self, name: str) -> str:
        """Render as `name=value<unit>;warn;crit;;`."""
        return f"{name}={self.value}{self.unit};{_threshold(self.warning)};{_threshold(self.critical)};;"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check evaluation."""
    status: Status
    message: str
    metrics: Dict[str, Metric] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, metrics: Optional[Dict[str, Metric]] = None) -> 'CheckResult':
        return cls(Status.OK, message, metrics or {})

    @classmethod
    def warning(cls, message: str, metrics: Optional[Dict[str, Metric]] = None) -> 'CheckResult':
        return cls(Status.WARNING, message, metrics or {})

    @classmethod
    def critical(cls, message: str, metrics: Optional[Dict[str, Metric]] = None) -> 'CheckResult':
        return cls(Status.CRITICAL, message, metrics or {})

    @classmethod
    def unknown(cls, message: str) -> 'CheckResult':
        return cls(Status.UNKNOWN, message)

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def perfdata(self) -> str:
        """Space separated performance data, empty when there are no metrics."""
        return " ".join(metric.to_perfdata(name) for name, metric in self.metrics.items())

    def render(self, label: str = "") -> str:
        """Format the single plugin output line."""
        prefix = f"{label} " if label else ""
        line = f"{prefix}{self.status.name} - {self.message}"
        perfdata = self.perfdata()
        if perfdata:
            line += f"|{perfdata}"
        return line
