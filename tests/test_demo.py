import io
import random

import pytest

from netproto_analyzer.demo import demonstrate_visualization, main, simulate_step
from netproto_analyzer.stats import PacketStats


def protocol_sum(stats):
    return stats.tcp_packets + stats.udp_packets + stats.icmp_packets + stats.other_packets


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_simulate_step_invariants(seed):
    stats = PacketStats()
    start_bytes = 1000
    total = simulate_step(stats, random.Random(seed), start_bytes)
    added_packets = stats.total_packets
    added_bytes = total - start_bytes
    assert 5 <= added_packets <= 25
    assert protocol_sum(stats) == added_packets
    assert stats.total_bytes == total
    assert added_bytes % added_packets == 0
    assert 64 <= added_bytes // added_packets <= 1500


def test_simulate_step_accumulates():
    stats = PacketStats()
    rng = random.Random(7)
    total = 0
    previous = 0
    for _ in range(5):
        total = simulate_step(stats, rng, total)
        assert total > previous
        previous = total
    assert protocol_sum(stats) == stats.total_packets
    assert 25 <= stats.total_packets <= 125


def test_simulate_step_is_deterministic_for_a_seed():
    first, second = PacketStats(), PacketStats()
    assert simulate_step(first, random.Random(3), 0) == simulate_step(second, random.Random(3), 0)
    assert first == second


def test_demonstrate_visualization_output():
    out = io.StringIO()
    stats = demonstrate_visualization(iterations=3, delay=0, rng=random.Random(5), out=out)
    text = out.getvalue()
    assert text.startswith("Network Protocol Analyzer - Visualization Demo")
    assert text.count("NETWORK PROTOCOL ANALYZER") == 3
    assert text.rstrip().endswith("Demo completed!")
    assert protocol_sum(stats) == stats.total_packets
    assert 15 <= stats.total_packets <= 75


def test_demonstrate_visualization_reproducible():
    a = demonstrate_visualization(4, 0, random.Random(11), io.StringIO())
    b = demonstrate_visualization(4, 0, random.Random(11), io.StringIO())
    assert a == b


def test_zero_iterations_leaves_stats_empty():
    out = io.StringIO()
    stats = demonstrate_visualization(0, 0, random.Random(1), out)
    assert stats == PacketStats()
    assert "NETWORK PROTOCOL ANALYZER" not in out.getvalue()


def test_main_runs(capsys):
    assert main(["--iterations", "2", "--delay", "0", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Demo completed!" in out
    assert out.count("NETWORK PROTOCOL ANALYZER") == 2