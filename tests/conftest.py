"""Shared fixtures for PS 2000 tests."""

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ps2000 import (
    PS2000,
    Register,
    TransportError,
    checksum,
    encode_float,
    reply_frame_size,
)


def make_reply(register, payload=b"", node=0):
    """Build a device reply frame: SD | node | object | payload | checksum.

    Replies shorter than header + checksum are filled with 0xFF.
    """
    size = reply_frame_size(register)
    if size < 5:
        return b"\xff" * size
    payload = payload.ljust(size - 5, b"\x00")[: size - 5]
    body = bytes([0x80 + (size - 5 - 1), node, register]) + payload
    return body + checksum(body)


class FakeTransport:
    """Scripted transport: answers each request with the reply registered
    for its object byte, and records everything it is asked to do."""

    def __init__(self, replies=None):
        self.replies = dict(replies or {})
        self.written = []
        self.discards = 0
        self.closed = False
        self._pending = b""

    def write(self, data):
        self.written.append(bytes(data))
        register = data[2]
        if register not in self.replies:
            raise TransportError(f"no reply scripted for object {register}")
        self._pending = self.replies[register]

    def read_exactly(self, n):
        data, self._pending = self._pending[:n], self._pending[n:]
        if len(data) != n:
            raise TransportError(f"Short read: expected {n} byte(s), got {len(data)}")
        return data

    def discard_pending_input(self):
        self.discards += 1
        self._pending = b""

    def close(self):
        self.closed = True


@pytest.fixture
def device_replies():
    """Replies of a PS 2342-10B style device (42 V / 10 A / 160 W)."""
    return {
        Register.DEVICE_TYPE: make_reply(Register.DEVICE_TYPE, b"PS 2342-10B\x00"),
        Register.SERIAL_NUMBER: make_reply(Register.SERIAL_NUMBER, b"1234567890\x00"),
        Register.ARTICLE_NUMBER: make_reply(Register.ARTICLE_NUMBER, b"39200112\x00"),
        Register.MANUFACTURER: make_reply(Register.MANUFACTURER, b"EA\x00"),
        Register.SOFTWARE_VERSION: make_reply(Register.SOFTWARE_VERSION, b"V2.01 09.10.12  "),
        Register.NOMINAL_VOLTAGE: make_reply(Register.NOMINAL_VOLTAGE, encode_float(42.0)),
        Register.NOMINAL_CURRENT: make_reply(Register.NOMINAL_CURRENT, encode_float(10.0)),
        Register.NOMINAL_POWER: make_reply(Register.NOMINAL_POWER, encode_float(160.0)),
        Register.SET_VALUE_VOLTAGE: make_reply(Register.SET_VALUE_VOLTAGE),
        Register.SET_VALUE_CURRENT: make_reply(Register.SET_VALUE_CURRENT),
        Register.POWER_SUPPLY_CONTROL: make_reply(Register.POWER_SUPPLY_CONTROL),
        # remote on, output on + CC + OVP, 50 % Unom, 25 % Inom
        Register.STATUS_ACTUAL: make_reply(
            Register.STATUS_ACTUAL, bytes([0x01, 0x13, 0x32, 0x00, 0x19, 0x00])
        ),
        # local, output off, 100 % Unom, 10 % Inom
        Register.STATUS_SET: make_reply(
            Register.STATUS_SET, bytes([0x00, 0x00, 0x64, 0x00, 0x0A, 0x00])
        ),
    }


@pytest.fixture
def fake_transport(device_replies):
    return FakeTransport(device_replies)


@pytest.fixture
def psu(fake_transport):
    """A connected PS2000 talking to the fake transport."""
    device = PS2000("/dev/fake", transport=fake_transport)
    device.connect()
    fake_transport.written.clear()
    return device
