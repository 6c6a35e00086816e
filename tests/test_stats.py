from netproto_analyzer.stats import PacketStats


def test_defaults_are_zero():
    stats = PacketStats()
    assert (
        stats.total_packets,
        stats.tcp_packets,
        stats.udp_packets,
        stats.icmp_packets,
        stats.other_packets,
        stats.total_bytes,
    ) == (0, 0, 0, 0, 0, 0)


def test_copy_is_equal():
    stats = PacketStats(total_packets=7, tcp_packets=3, udp_packets=2,
                        icmp_packets=1, other_packets=1, total_bytes=900)
    assert stats.copy() == stats


def test_copy_is_independent():
    stats = PacketStats(total_packets=4, tcp_packets=4, total_bytes=256)
    snapshot = stats.copy()
    stats.total_packets += 1
    stats.tcp_packets += 1
    assert snapshot.total_packets == 4
    assert snapshot.tcp_packets == 4
    assert snapshot != stats