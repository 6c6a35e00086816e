"""Text-mode dashboards for live packet statistics."""

from __future__ import annotations

import subprocess
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, TextIO

from netproto_analyzer.stats import PacketStats

BORDER = "+==================================================================+"
HISTORY_LIMIT = 60
GRAPH_SAMPLES = 20
GRAPH_WIDTH = 60


@dataclass
class TimeSeriesData:
    """One bandwidth sample."""

    timestamp: float
    packet_count: int
    bytes_per_second: int


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def progress_bar_line(label: str, current: int, total: int, width: int = 30) -> str:
    """Render one protocol share as a bar with percentage and count."""
    percentage = current / total * 100.0 if total > 0 else 0.0
    filled = max(0, min(int(percentage * width / 100.0), width))
    bar = "#" * filled + "-" * (width - filled)
    return f"| {label} [{bar}] {percentage:>6.1f}% ({current}) |"


def bandwidth_symbol(value: int, max_bandwidth: int) -> str:
    """Pick the chart character for a sample scaled against the maximum."""
    scale = max_bandwidth or 1
    height = _trunc_div(value * 10, scale)
    if height == 0 and value > 0:
        height = 1
    if height >= 6:
        return "#"
    if height >= 4:
        return "="
    if height >= 2:
        return "-"
    if height >= 1:
        return "."
    return " "


class NetworkVisualizer:
    """Keeps a bandwidth history and draws a console dashboard."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._clock = clock if clock is not None else time.monotonic
        self.start_time = self._clock()
        self.bandwidth_history: Deque[TimeSeriesData] = deque(maxlen=HISTORY_LIMIT)
        self.last_stats = PacketStats()
        self.total_bytes_processed = 0

    def _elapsed(self) -> int:
        return int(self._clock() - self.start_time)

    def _write(self, line: str) -> None:
        print(line, file=self._out)

    def update_stats(self, stats: PacketStats, total_bytes: int) -> None:
        """Record a new sample of the counters."""
        now = self._clock()
        duration = int(now - self.start_time)
        bytes_per_second = _trunc_div(total_bytes, duration) if duration > 0 else 0
        self.bandwidth_history.append(
            TimeSeriesData(now, stats.total_packets, bytes_per_second)
        )
        self.last_stats = stats.copy()
        self.total_bytes_processed = total_bytes

    def clear(self) -> None:
        """Clear the terminal when writing to one."""
        isatty = getattr(self._out, "isatty", None)
        if not (isatty and isatty()):
            return
        command = "cls" if sys.platform.startswith("win") else "clear"
        try:
            subprocess.run(command, shell=True, check=False)
        except OSError:
            pass

    def display_real_time_stats(self) -> None:
        """Redraw the whole dashboard."""
        self.clear()
        self._write(BORDER)
        self._write("|                   NETWORK PROTOCOL ANALYZER                     |")
        self._write(BORDER)
        duration = self._elapsed()
        self._write(
            f"| Runtime: {duration:>8} seconds  |  Total Bytes: "
            f"{self.total_bytes_processed:>12} |"
        )
        self._write(BORDER)
        self.display_network_metrics(self.last_stats)
        self.display_protocol_distribution(self.last_stats)
        self.display_bandwidth_graph()
        self._write(BORDER)
        self._write("Press Ctrl+C to stop capture...")

    def display_network_metrics(self, stats: PacketStats) -> None:
        """Show packet rate, average size and bandwidth."""
        self._write("| NETWORK METRICS                                                  |")
        self._write(BORDER)
        duration = self._elapsed()
        packets_per_second = stats.total_packets / duration if duration > 0 else 0.0
        avg_packet_size = (
            self.total_bytes_processed / stats.total_packets
            if stats.total_packets > 0
            else 0.0
        )
        bandwidth = _trunc_div(self.total_bytes_processed * 8, duration if duration > 0 else 1)
        self._write(
            f"| Total Packets: {stats.total_packets:>8}  |  Packets/sec: "
            f"{packets_per_second:>8.1f} |"
        )
        self._write(
            f"| Avg Packet Size: {avg_packet_size:>6.0f} bytes  |  Bandwidth: "
            f"{bandwidth:>6} bps     |"
        )
        self._write(BORDER)

    def display_protocol_distribution(self, stats: PacketStats) -> None:
        """Show each protocol's share of all packets."""
        self._write("| PROTOCOL DISTRIBUTION                                            |")
        self._write(BORDER)
        if stats.total_packets > 0:
            for label, count in (
                ("TCP   ", stats.tcp_packets),
                ("UDP   ", stats.udp_packets),
                ("ICMP  ", stats.icmp_packets),
                ("Other ", stats.other_packets),
            ):
                self._write(progress_bar_line(label, count, stats.total_packets, 40))
        else:
            self._write("| No packets captured yet...                                       |")
        self._write(BORDER)

    def _recent_bandwidth(self) -> List[int]:
        return [sample.bytes_per_second for sample in self.bandwidth_history][-GRAPH_SAMPLES:]

    def display_bandwidth_graph(self) -> None:
        """Chart the most recent bandwidth samples."""
        self._write("| BANDWIDTH HISTORY (last 20 measurements)                        |")
        self._write(BORDER)
        if len(self.bandwidth_history) < 2:
            self._write("| Collecting data...                                               |")
        else:
            recent = self._recent_bandwidth()
            max_bandwidth = max(recent) or 1
            chart = "".join(bandwidth_symbol(value, max_bandwidth) for value in recent)
            self._write(f"| {chart.ljust(GRAPH_WIDTH)} |")
            self._write(
                f"| Max: {max_bandwidth:>8} bytes/sec                                    |"
            )
        self._write(BORDER)