import builtins
import socket

import pytest

from netproto_analyzer.cli import choose_device, main


class FakeSocket:
    def __init__(self, frames):
        self._frames = list(frames)
        self.closed = False

    def bind(self, address):
        self.bound = address

    def settimeout(self, value):
        self.timeout = value

    def recv(self, size):
        if not self._frames:
            raise KeyboardInterrupt
        return self._frames.pop(0)

    def close(self):
        self.closed = True


def tcp_frame():
    header = bytearray(34)
    header[12:14] = (0x0800).to_bytes(2, "big")
    header[23] = 6
    return bytes(header)


@pytest.fixture
def two_devices(monkeypatch):
    monkeypatch.setattr(socket, "if_nameindex", lambda: [(1, "lo"), (2, "eth0")])


@pytest.mark.parametrize(
    "choice, expected",
    [(0, "lo"), (1, "eth0"), (-1, None), (2, None), (-5, None)],
)
def test_choose_device(choice, expected):
    assert choose_device(["lo", "eth0"], choice) == expected


def test_no_devices(monkeypatch, capsys):
    monkeypatch.setattr(socket, "if_nameindex", lambda: [])
    assert main(["0"]) == 1
    assert "No devices found!" in capsys.readouterr().err


def test_device_listing_error(monkeypatch, capsys):
    def broken():
        raise OSError("unavailable")

    monkeypatch.setattr(socket, "if_nameindex", broken)
    assert main(["0"]) == 1
    err = capsys.readouterr().err
    assert "Error finding devices" in err


def test_exit_choice(two_devices, capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert "0: lo" in out
    assert "1: eth0" in out
    assert "Exiting..." in out


def test_out_of_range_choice(two_devices, capsys):
    assert main(["7"]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_non_numeric_choice(two_devices, capsys):
    assert main(["abc"]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_prompted_choice(two_devices, monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "-1")
    assert main([]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_capture_failure(two_devices, monkeypatch, capsys):
    def refuse(*args, **kwargs):
        raise PermissionError("operation not permitted")

    monkeypatch.setattr(socket, "AF_PACKET", 17, raising=False)
    monkeypatch.setattr(socket, "socket", refuse)
    assert main(["1"]) == 1
    err = capsys.readouterr().err
    assert "Failed to start packet capture!" in err


def test_capture_runs_on_chosen_device(two_devices, monkeypatch, capsys):
    fake = FakeSocket([tcp_frame() for _ in range(3)])
    monkeypatch.setattr(socket, "AF_PACKET", 17, raising=False)
    monkeypatch.setattr(socket, "socket", lambda *args, **kwargs: fake)
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    assert fake.bound == ("eth0", 0)
    assert "Starting capture on: eth0" in out
    assert "Total packets: 3" in out
    assert "TCP packets: 3" in out