"""Live packet capture and per-protocol classification of Ethernet frames."""

from __future__ import annotations

import socket
from enum import Enum
from typing import Callable, Dict, List, Optional

from netproto_analyzer.stats import PacketStats

ETHERNET_HEADER_LEN = 14
ETHERTYPE_IPV4 = 0x0800
IP_PROTOCOL_OFFSET = ETHERNET_HEADER_LEN + 9
ETH_P_ALL = 0x0003
SNAPLEN = 65536
READ_TIMEOUT = 1.0
CALLBACK_INTERVAL = 10

StatsCallback = Callable[[PacketStats, int], None]


class Protocol(Enum):
    """Transport protocols the analyzer counts separately."""

    TCP = "TCP"
    UDP = "UDP"
    ICMP = "ICMP"
    OTHER = "Other"


_IP_PROTOCOLS: Dict[int, Protocol] = {
    6: Protocol.TCP,
    17: Protocol.UDP,
    1: Protocol.ICMP,
}

_COUNTER_FIELDS: Dict[Protocol, str] = {
    Protocol.TCP: "tcp_packets",
    Protocol.UDP: "udp_packets",
    Protocol.ICMP: "icmp_packets",
    Protocol.OTHER: "other_packets",
}


class CaptureError(Exception):
    """Raised when devices cannot be listed or a capture cannot run."""


def classify_frame(frame: bytes) -> Protocol:
    """Classify an Ethernet frame by the IPv4 protocol it carries."""
    if len(frame) < ETHERNET_HEADER_LEN:
        return Protocol.OTHER
    ether_type = int.from_bytes(frame[12:14], "big")
    if ether_type != ETHERTYPE_IPV4 or len(frame) <= IP_PROTOCOL_OFFSET:
        return Protocol.OTHER
    return _IP_PROTOCOLS.get(frame[IP_PROTOCOL_OFFSET], Protocol.OTHER)


def list_devices() -> List[str]:
    """Return the names of the network interfaces, ordered by index."""
    try:
        interfaces = socket.if_nameindex()
    except OSError as exc:
        raise CaptureError(f"Error finding devices: {exc}") from exc
    return [name for _, name in sorted(interfaces)]


class PacketCapture:
    """Reads frames from one interface and keeps protocol counters."""

    def __init__(self, device_name: str, callback: Optional[StatsCallback] = None) -> None:
        self.device_name = device_name
        self.callback = callback
        self.capturing = False
        self._stats = PacketStats()
        self._socket: Optional[socket.socket] = None

    @property
    def stats(self) -> PacketStats:
        """A snapshot of the counters."""
        return self._stats.copy()

    def __enter__(self) -> "PacketCapture":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_capture()

    def analyze_packet(self, frame: bytes, length: Optional[int] = None) -> Protocol:
        """Count one frame; ``length`` is its length on the wire."""
        stats = self._stats
        stats.total_packets += 1
        stats.total_bytes += len(frame) if length is None else length
        protocol = classify_frame(frame)
        field = _COUNTER_FIELDS[protocol]
        setattr(stats, field, getattr(stats, field) + 1)
        if self.callback is not None and stats.total_packets % CALLBACK_INTERVAL == 0:
            self.callback(stats.copy(), stats.total_bytes)
        return protocol

    def _open_socket(self) -> socket.socket:
        family = getattr(socket, "AF_PACKET", None)
        if family is None:
            raise CaptureError(
                "Failed to open device: raw packet capture is not supported on this platform"
            )
        try:
            sock = socket.socket(family, socket.SOCK_RAW, socket.htons(ETH_P_ALL))
        except OSError as exc:
            raise CaptureError(f"Failed to open device: {exc}") from exc
        try:
            sock.bind((self.device_name, 0))
            sock.settimeout(READ_TIMEOUT)
        except OSError as exc:
            sock.close()
            raise CaptureError(f"Failed to open device: {exc}") from exc
        return sock

    def start_capture(self) -> PacketStats:
        """Capture until interrupted or stopped, then print and return the totals."""
        self._socket = self._open_socket()
        print(f"Started packet capture on device: {self.device_name}")
        print("Press Ctrl+C to stop capture...")
        self.capturing = True
        try:
            while self.capturing and self._socket is not None:
                try:
                    frame = self._socket.recv(SNAPLEN)
                except socket.timeout:
                    continue
                except OSError as exc:
                    if not self.capturing:
                        break
                    raise CaptureError(f"Capture failed: {exc}") from exc
                self.analyze_packet(frame)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop_capture()
        print("\n" + self.final_report())
        return self.stats

    def stop_capture(self) -> None:
        """Close the capture socket and end the capture loop."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        self.capturing = False

    def final_report(self) -> str:
        """Summarise the counters as printable lines."""
        stats = self._stats
        return "\n".join(
            [
                "=== Final Capture Statistics ===",
                f"Total packets: {stats.total_packets}",
                f"TCP packets: {stats.tcp_packets}",
                f"UDP packets: {stats.udp_packets}",
                f"ICMP packets: {stats.icmp_packets}",
                f"Other packets: {stats.other_packets}",
            ]
        )