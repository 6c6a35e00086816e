"""Packet counters collected during a capture session."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class PacketStats:
    """Running totals of captured packets by protocol."""

    total_packets: int = 0
    tcp_packets: int = 0
    udp_packets: int = 0
    icmp_packets: int = 0
    other_packets: int = 0
    total_bytes: int = 0

    def copy(self) -> "PacketStats":
        """Return an independent snapshot of these counters."""
        return dataclasses.replace(self)