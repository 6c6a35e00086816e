# netproto-analyzer

A small network protocol analyzer for the terminal. It captures Ethernet
frames from a network interface, counts them by protocol (TCP, UDP, ICMP and
everything else), and redraws a live dashboard showing:

- runtime and total bytes seen
- total packets, packets per second, average packet size and bandwidth
- a bar per protocol with its share of the traffic
- a small ASCII chart of the last 20 bandwidth measurements

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Capturing live traffic

```
netproto-analyzer
```

The program lists the network interfaces with a number in front of each,
then asks which one to capture on. Enter the number of an interface, or `-1`
to exit; any number outside the list, or input that is not a number, also
exits. The number can be given on the command line instead of being asked
for:

```
netproto-analyzer 0
```

Once capture starts, the dashboard is refreshed every ten packets. Press
Ctrl+C to stop; a summary of the packet counts per protocol is printed at
the end. If the interface cannot be opened, the error is printed and the
command exits with status 1.

Capture uses raw `AF_PACKET` sockets, so it works on Linux only and usually
needs root privileges (or the `CAP_NET_RAW` capability). Frames are read
whole; no capture filters are supported.

## Trying the dashboard without a network device

```
netproto-demo
```

The demo generates random traffic (between 5 and 25 packets per step, one
size between 64 and 1500 bytes per step, each packet assigned to one of the
four protocol classes) and shows the same dashboard. Options:

- `--iterations N` – number of updates (default 100)
- `--delay SECONDS` – pause between updates (default 0.5)
- `--seed N` – random seed, for repeatable runs

The terminal is cleared before each redraw only when output goes to a
terminal.

## Using it as a library

```python
import io

from netproto_analyzer.stats import PacketStats
from netproto_analyzer.visualizer import NetworkVisualizer

out = io.StringIO()
visualizer = NetworkVisualizer(out=out)

stats = PacketStats(total_packets=10, tcp_packets=6, udp_packets=3, other_packets=1)
visualizer.update_stats(stats, 4200)
visualizer.display_protocol_distribution(stats)
print(out.getvalue())
```

`NetworkVisualizer` also takes a `clock` callable (defaulting to
`time.monotonic`) used for runtime and rate calculations, and keeps the last
60 samples in `bandwidth_history`.

In `netproto_analyzer.capture`, `classify_frame` returns the `Protocol` an
Ethernet frame belongs to (IPv4 TCP, UDP or ICMP, otherwise `Protocol.OTHER`),
and `PacketCapture.analyze_packet` folds a frame into the running counters,
calling the callback you supply with a copy of the `PacketStats` and the byte
total every ten packets. `PacketCapture.stats` returns a snapshot of the
counters and `PacketCapture.final_report()` the summary text. `list_devices()`
returns the interface names, and `CaptureError` is raised when they cannot be
listed or an interface cannot be captured from.