"""Synthetic traffic generator that exercises the dashboard."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import List, Optional, TextIO

from netproto_analyzer.stats import PacketStats
from netproto_analyzer.visualizer import NetworkVisualizer

PACKETS_PER_STEP = (5, 25)
PACKET_BYTES = (64, 1500)

_PROTOCOL_FIELDS = {1: "tcp_packets", 2: "udp_packets", 3: "icmp_packets", 4: "other_packets"}


def simulate_step(stats: PacketStats, rng: random.Random, total_bytes: int) -> int:
    """Add one burst of random packets to ``stats``; return the new byte total."""
    new_packets = rng.randint(*PACKETS_PER_STEP)
    packet_bytes = rng.randint(*PACKET_BYTES)
    for _ in range(new_packets):
        stats.total_packets += 1
        total_bytes += packet_bytes
        field = _PROTOCOL_FIELDS[rng.randint(1, 4)]
        setattr(stats, field, getattr(stats, field) + 1)
    stats.total_bytes = total_bytes
    return total_bytes


def demonstrate_visualization(
    iterations: int = 100,
    delay: float = 0.5,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> PacketStats:
    """Feed random traffic to a dashboard and return the final counters."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    visualizer = NetworkVisualizer(out=out)
    stats = PacketStats()

    print("Network Protocol Analyzer - Visualization Demo", file=out)
    print("Generating sample network data...", file=out)
    print("Press Ctrl+C to stop\n", file=out)

    total_bytes = 0
    for _ in range(iterations):
        total_bytes = simulate_step(stats, rng, total_bytes)
        visualizer.update_stats(stats, total_bytes)
        visualizer.display_real_time_stats()
        if delay > 0:
            time.sleep(delay)

    print("\nDemo completed!", file=out)
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Run the dashboard demo."""
    parser = argparse.ArgumentParser(
        prog="netproto-demo", description="Show the dashboard with generated traffic."
    )
    parser.add_argument("--iterations", type=int, default=100, help="number of updates")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between updates")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        demonstrate_visualization(args.iterations, args.delay, random.Random(args.seed))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())