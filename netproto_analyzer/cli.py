"""Command line entry point: pick an interface and watch its traffic."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from netproto_analyzer.capture import CaptureError, PacketCapture, list_devices
from netproto_analyzer.stats import PacketStats
from netproto_analyzer.visualizer import NetworkVisualizer


def choose_device(devices: Sequence[str], choice: int) -> Optional[str]:
    """Return the chosen device name, or None for -1 or an out-of-range number."""
    if 0 <= choice < len(devices):
        return devices[choice]
    return None


def _read_choice(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        try:
            raw = input("\nEnter device number to capture (or -1 to exit): ")
        except EOFError:
            return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """Run the interactive analyzer; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="netproto-analyzer",
        description="Capture packets on an interface and show live protocol statistics.",
    )
    parser.add_argument(
        "choice",
        nargs="?",
        help="device number to capture (or -1 to exit); asked for when omitted",
    )
    args = parser.parse_args(argv)

    print("Network Protocol Analyzer started.")
    print("Available network devices:")
    try:
        devices = list_devices()
    except CaptureError as exc:
        print(exc, file=sys.stderr)
        devices = []
    for number, name in enumerate(devices):
        print(f"{number}: {name}")
    if not devices:
        print("No devices found!", file=sys.stderr)
        return 1

    choice = _read_choice(args.choice)
    device = choose_device(devices, choice) if choice is not None else None
    if device is None:
        print("Exiting...")
        return 0

    print(f"Starting capture on: {device}")
    visualizer = NetworkVisualizer()

    def show(stats: PacketStats, total_bytes: int) -> None:
        visualizer.update_stats(stats, total_bytes)
        visualizer.display_real_time_stats()

    capture = PacketCapture(device, show)
    try:
        capture.start_capture()
    except CaptureError as exc:
        print(exc, file=sys.stderr)
        print("Failed to start packet capture!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())