"""CPU time and memory usage measurement for the running process."""

from __future__ import annotations

import re
import resource
import time
from dataclasses import dataclass

STATUS_PATH = "/proc/self/status"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class UsageStat:
    """A snapshot or difference of resource usage.

    Memory figures are in kilobytes, times in microseconds.
    """

    vm_size: int = 0
    vm_peak: int = 0
    vm_diff: int = 0
    r_time: int = 0
    u_time: int = 0
    s_time: int = 0

    @property
    def cpu_time(self) -> int:
        """User plus system time in microseconds."""
        return self.u_time + self.s_time


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class UsageMeter:
    """Measures time and memory used since a total and a period start."""

    def __init__(self) -> None:
        self._total_start = UsageStat()
        self._period_start = UsageStat()

    def total_start(self) -> None:
        """Start the total timer; meant to be called once."""
        self._total_start = self.check_usage()

    def period_start(self) -> None:
        """Start the period timer; may be called many times."""
        self._period_start = self.check_usage()

    def total_usage(self) -> UsageStat:
        """Usage since the total start."""
        return self._since(self._total_start)

    def period_usage(self) -> UsageStat:
        """Usage since the period start."""
        return self._since(self._period_start)

    def check_usage(self) -> UsageStat:
        """Current absolute usage of the process.

        Raises OSError when the memory figures cannot be read.
        """
        usage = resource.getrusage(resource.RUSAGE_SELF)
        stat = UsageStat(
            u_time=round(usage.ru_utime * 1_000_000),
            s_time=round(usage.ru_stime * 1_000_000),
            r_time=time.time_ns() // 1000,
        )
        try:
            with open(STATUS_PATH, encoding="ascii", errors="replace") as status:
                for line in status:
                    if (pos := line.find("VmPeak:")) >= 0:
                        stat.vm_peak = _leading_int(line[pos + 7:])
                        continue
                    if (pos := line.find("VmSize:")) >= 0:
                        stat.vm_size = _leading_int(line[pos + 7:])
                        break
        except OSError as exc:
            raise OSError(f"cannot get memory usage: {exc}") from exc
        return stat

    def _since(self, start: UsageStat) -> UsageStat:
        now = self.check_usage()
        return UsageStat(
            vm_size=now.vm_size,
            vm_peak=max(now.vm_peak, start.vm_peak),
            vm_diff=now.vm_size - start.vm_size,
            r_time=now.r_time - start.r_time,
            u_time=now.u_time - start.u_time,
            s_time=now.s_time - start.s_time,
        )