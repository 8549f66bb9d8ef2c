#!/usr/bin/env python3
"""
EA PS 2000 B Power Supply — Python API

Binary telegram protocol over the device's USB virtual COM port. Every
request is a fixed-format telegram addressing one device object (register)
on one output; the reply length is known in advance from the register alone.

Telegram layout::

    +-----------+------+----------+------------------+-------------+
    | SD        | Node | Object   | Payload          | Checksum    |
    | 1 byte    | 1 B  | 1 byte   | 0..16 bytes      | 2 bytes, BE |
    +-----------+------+----------+------------------+-------------+

- SD (start delimiter): bits 6-7 message type, bit 5 cast type, bit 4
  direction, bits 0-3 (payload size class - 1)
- Checksum: 16-bit sum of all preceding bytes, big-endian

Requires: pyserial (`pip install pyserial`)
"""

import enum
import logging
import math
import struct
import threading
import types
from dataclasses import dataclass
from typing import Optional, Protocol

import serial

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants — telegram structure
# ---------------------------------------------------------------------------
HEADER_LENGTH = 3
CHECKSUM_LENGTH = 2

# Set values are percent of nominal * 256
PERCENT_SCALE = 25600

DEFAULT_PORT = "/dev/ttyACM0"
DEFAULT_BAUD = 115200
DEFAULT_TIMEOUT = 1.0


class Register(enum.IntEnum):
    """Device objects addressable over the telegram protocol."""

    DEVICE_TYPE = 0
    SERIAL_NUMBER = 1
    NOMINAL_VOLTAGE = 2
    NOMINAL_CURRENT = 3
    NOMINAL_POWER = 4
    ARTICLE_NUMBER = 6
    MANUFACTURER = 8
    SOFTWARE_VERSION = 9
    DEVICE_CLASS = 19
    OVP_THRESHOLD = 38
    OCP_THRESHOLD = 39
    SET_VALUE_VOLTAGE = 50
    SET_VALUE_CURRENT = 51
    POWER_SUPPLY_CONTROL = 54
    STATUS_ACTUAL = 71
    STATUS_SET = 72


class Node(enum.IntEnum):
    """Output channel (sub-device) selector."""

    OUTPUT1 = 0
    OUTPUT2 = 1


class MessageType(enum.IntEnum):
    SEND = 0xC0
    QUERY = 0x40
    ANSWER = 0x80


class CastType(enum.IntEnum):
    ANSWER = 0x00
    BROADCAST = 0x20


class Direction(enum.IntEnum):
    IN = 0x00
    OUT = 0x10


class FrameMode(enum.Enum):
    WRITE = "write"
    QUERY = "query"


# Power supply control words (object 54): mask byte, value byte
PSU_CTRL_REMOTE_ON = b"\x10\x10"
PSU_CTRL_REMOTE_OFF = b"\x10\x00"
PSU_CTRL_OUTPUT_ON = b"\x01\x01"
PSU_CTRL_OUTPUT_OFF = b"\x01\x00"
PSU_CTRL_ACK_ALARMS = b"\x0A\x0A"
PSU_CTRL_TRACKING_ON = b"\xF0\xF0"
PSU_CTRL_TRACKING_OFF = b"\xF0\xE0"

# Status byte bits (objects 71/72, payload byte 1)
STATUS_OUTPUT_ON = 0x01
STATUS_CONTROLLER_MASK = 0x06
STATUS_TRACKING = 0x08
STATUS_OVP = 0x10
STATUS_OCP = 0x20
STATUS_OPP = 0x40
STATUS_OTP = 0x80


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class PS2000Error(Exception):
    """Base error for the PS 2000 driver."""


class UnknownRegisterError(PS2000Error):
    """Raised when a register code is not in the catalog."""


class PayloadLengthMismatchError(PS2000Error):
    """Raised when a write payload does not match the register's size."""


class ReplyLengthError(PS2000Error):
    """Raised when a reply does not have the register's reply length."""


class ChecksumError(PS2000Error):
    """Raised by strict reply parsing when the received checksum is wrong."""


class TransportError(PS2000Error):
    """Raised on serial I/O failures (short read, timeout, link fault)."""


# ---------------------------------------------------------------------------
# Register catalog
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RegisterInfo:
    """Static facts about one register.

    payload_size is the size class used in write telegrams and in the start
    delimiter; reply_size is the total length of the device's reply frame.
    """

    payload_size: int
    reply_size: int
    writable: bool = False


CATALOG = types.MappingProxyType({
    Register.DEVICE_TYPE: RegisterInfo(16, 17),
    Register.SERIAL_NUMBER: RegisterInfo(16, 16),
    Register.NOMINAL_VOLTAGE: RegisterInfo(4, 9),
    Register.NOMINAL_CURRENT: RegisterInfo(4, 9),
    Register.NOMINAL_POWER: RegisterInfo(4, 9),
    Register.ARTICLE_NUMBER: RegisterInfo(16, 14),
    Register.MANUFACTURER: RegisterInfo(16, 8),
    Register.SOFTWARE_VERSION: RegisterInfo(16, 21),
    Register.DEVICE_CLASS: RegisterInfo(2, 2),
    Register.OVP_THRESHOLD: RegisterInfo(2, 2, writable=True),
    Register.OCP_THRESHOLD: RegisterInfo(2, 2, writable=True),
    Register.SET_VALUE_VOLTAGE: RegisterInfo(2, 2, writable=True),
    Register.SET_VALUE_CURRENT: RegisterInfo(2, 2, writable=True),
    Register.POWER_SUPPLY_CONTROL: RegisterInfo(2, 2, writable=True),
    Register.STATUS_ACTUAL: RegisterInfo(11, 11),
    Register.STATUS_SET: RegisterInfo(11, 11),
})


def lookup(register: int) -> RegisterInfo:
    """Return the catalog entry for a register code."""
    try:
        return CATALOG[register]
    except KeyError:
        raise UnknownRegisterError(f"Unsupported register: {register!r}") from None


def reply_frame_size(register: int) -> int:
    """Total number of bytes the device sends back for this register."""
    return lookup(register).reply_size


# ---------------------------------------------------------------------------
# Telegram codec
# ---------------------------------------------------------------------------
def frame_mode(register: int, has_payload: bool) -> FrameMode:
    """Decide whether a telegram is sent as a write or as a query.

    Only a writable register with a non-empty payload is written; anything
    else, including a payload aimed at a read-only register, is a query.
    """
    if lookup(register).writable and has_payload:
        return FrameMode.WRITE
    return FrameMode.QUERY


def start_delimiter(mode: FrameMode, size_class: int) -> int:
    """Compose the start delimiter byte.

    At a query the length field still carries the register's size class,
    i.e. the length of the data expected back.
    """
    message_type = MessageType.SEND if mode is FrameMode.WRITE else MessageType.QUERY
    return message_type + CastType.BROADCAST + Direction.OUT + (size_class - 1)


def checksum(data: bytes) -> bytes:
    """16-bit arithmetic sum of data, big-endian."""
    return (sum(data) & 0xFFFF).to_bytes(CHECKSUM_LENGTH, "big")


@dataclass(frozen=True)
class Telegram:
    """One request telegram, built per exchange and then discarded."""

    register: Register
    node: Node = Node.OUTPUT1
    payload: bytes = b""

    def __post_init__(self):
        info = lookup(self.register)
        payload = bytes(self.payload or b"")
        writing = frame_mode(self.register, bool(payload)) is FrameMode.WRITE
        if writing and len(payload) != info.payload_size:
            raise PayloadLengthMismatchError(
                f"{Register(self.register).name} expects {info.payload_size} "
                f"data byte(s), got {len(payload)}"
            )
        object.__setattr__(self, "register", Register(self.register))
        object.__setattr__(self, "node", Node(self.node))
        object.__setattr__(self, "payload", payload if writing else b"")

    @property
    def info(self) -> RegisterInfo:
        return lookup(self.register)

    @property
    def writing(self) -> bool:
        return bool(self.payload)

    @property
    def mode(self) -> FrameMode:
        return FrameMode.WRITE if self.writing else FrameMode.QUERY

    @property
    def reply_length(self) -> int:
        return self.info.reply_size

    def wrap(self) -> bytes:
        """Serialize to wire bytes: SD | node | object | payload | checksum."""
        header = bytes([
            start_delimiter(self.mode, self.info.payload_size),
            self.node,
            self.register,
        ])
        body = header + self.payload
        return body + checksum(body)

    def unwrap(self, reply: bytes, strict: bool = False) -> bytes:
        return parse_reply(reply, self.register, strict=strict)

    def __str__(self) -> str:
        return self.wrap().hex(" ").upper()


def build_request(register: int, node: int = Node.OUTPUT1,
                  payload: Optional[bytes] = None) -> tuple[bytes, int]:
    """Build a request frame and return it with the expected reply length."""
    telegram = Telegram(register, node, payload or b"")
    return telegram.wrap(), telegram.reply_length


def parse_reply(reply: bytes, register: int, strict: bool = False) -> bytes:
    """Strip header and checksum from a reply frame and return the payload.

    The received checksum is not verified unless strict is set, so a
    corrupted reply of the right length is returned as-is by default.
    """
    expected = reply_frame_size(register)
    if len(reply) != expected:
        raise ReplyLengthError(
            f"{Register(register).name} reply must be {expected} byte(s), "
            f"got {len(reply)}"
        )
    if len(reply) < HEADER_LENGTH + CHECKSUM_LENGTH:
        return b""
    if strict:
        received = bytes(reply[-CHECKSUM_LENGTH:])
        computed = checksum(reply[:-CHECKSUM_LENGTH])
        if received != computed:
            raise ChecksumError(
                f"checksum mismatch: received {received.hex()}, "
                f"computed {computed.hex()}"
            )
    return bytes(reply[HEADER_LENGTH:len(reply) - CHECKSUM_LENGTH])


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------
def encode_percent(value: float, nominal: float) -> bytes:
    """Encode a physical value as a 16-bit big-endian percent of nominal.

    Rounds up: 25600 * 25.5 V / 42 V = 15542.86 -> 15543 (0x3CB7).
    """
    if nominal <= 0:
        raise ValueError(f"Nominal value must be positive, got {nominal}")
    raw = math.ceil(PERCENT_SCALE * value / nominal)
    if not 0 <= raw <= 0x7FFF:
        raise ValueError(f"{value} is out of range for nominal {nominal}")
    return struct.pack(">h", raw)


def decode_percent(data: bytes, offset: int = 0) -> float:
    """Decode a signed 16-bit big-endian percent value as a fraction of nominal.

    Actual values near zero may come back slightly negative (0xFFxx).
    """
    return struct.unpack_from(">h", data, offset)[0] / float(PERCENT_SCALE)


def parse_float(data: bytes, offset: int = 0) -> float:
    """Extract an IEEE 754 big-endian float32."""
    return struct.unpack_from(">f", data, offset)[0]


def encode_float(value: float) -> bytes:
    """Encode a float32 as IEEE 754 big-endian."""
    return struct.pack(">f", value)


def parse_string(data: bytes) -> str:
    """Decode an identification string slot."""
    return data.decode("ascii", errors="replace").strip("\x00 \t\r\n")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------
class Transport(Protocol):
    def write(self, data: bytes) -> None:
        """Send raw bytes to the device."""

    def read_exactly(self, n: int) -> bytes:
        """Read exactly n bytes or raise TransportError."""

    def discard_pending_input(self) -> None:
        """Drop anything left in the receive buffer."""

    def close(self) -> None:
        """Release the link."""


class SerialTransport:
    """Byte-counted serial link (115200 8O1, no read termination)."""

    def __init__(self, port: str, baud: int = DEFAULT_BAUD,
                 timeout: float = DEFAULT_TIMEOUT):
        try:
            self._ser = serial.Serial(
                port, baud,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_ODD,
                stopbits=serial.STOPBITS_ONE,
                timeout=timeout,
            )
            self._ser.reset_input_buffer()
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Failed to open {port}: {exc}") from exc

    @property
    def is_open(self) -> bool:
        return self._ser.is_open

    def write(self, data: bytes) -> None:
        try:
            self._ser.write(data)
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Serial write failed: {exc}") from exc

    def read_exactly(self, n: int) -> bytes:
        try:
            data = self._ser.read(n)
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Serial read failed: {exc}") from exc
        if len(data) != n:
            raise TransportError(f"Short read: expected {n} byte(s), got {len(data)}")
        return data

    def discard_pending_input(self) -> None:
        try:
            self._ser.reset_input_buffer()
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Failed to flush input: {exc}") from exc

    def close(self) -> None:
        if self._ser.is_open:
            self._ser.close()


# ---------------------------------------------------------------------------
# Channel status
# ---------------------------------------------------------------------------
@dataclass
class ChannelStatus:
    """Decoded reply of the status objects (actual or set values)."""

    voltage: float
    current: float
    remote: bool
    flags: int

    @property
    def output_on(self) -> bool:
        return bool(self.flags & STATUS_OUTPUT_ON)

    @property
    def mode(self) -> str:
        # bits 1-2: 00 = CV, 01 = CC, others undefined
        state = (self.flags & STATUS_CONTROLLER_MASK) >> 1
        if state == 0:
            return "CV"
        if state == 1:
            return "CC"
        return f"Unknown({state})"

    @property
    def tracking(self) -> bool:
        return bool(self.flags & STATUS_TRACKING)

    @property
    def protections(self) -> list[str]:
        names = []
        for bit, name in ((STATUS_OVP, "OVP"), (STATUS_OCP, "OCP"),
                          (STATUS_OPP, "OPP"), (STATUS_OTP, "OTP")):
            if self.flags & bit:
                names.append(name)
        return names

    def as_dict(self) -> dict:
        return {
            "voltage": self.voltage,
            "current": self.current,
            "remote": self.remote,
            "output_on": self.output_on,
            "mode": self.mode,
            "tracking": self.tracking,
            "protections": self.protections,
            "flags": self.flags,
        }


# ---------------------------------------------------------------------------
# PS2000 class
# ---------------------------------------------------------------------------
class PS2000:
    """Python API for the EA PS 2000 B series power supplies.

    Usage::

        with PS2000("/dev/ttyACM0") as psu:
            psu.set_remote_control(Node.OUTPUT1, True)
            psu.set_voltage(Node.OUTPUT1, 12.0)
            print(psu.read_status(Node.OUTPUT1))
    """

    def __init__(self, port: str = DEFAULT_PORT, baud: int = DEFAULT_BAUD,
                 timeout: float = DEFAULT_TIMEOUT,
                 transport: Optional[Transport] = None):
        self._port = port
        self._baud = baud
        self._timeout = timeout
        self._transport = transport
        self._lock = threading.Lock()

        # Populated on connect
        self._nominal_voltage: Optional[float] = None
        self._nominal_current: Optional[float] = None

    # -- Properties ----------------------------------------------------------

    @property
    def nominal_voltage(self) -> Optional[float]:
        return self._nominal_voltage

    @property
    def nominal_current(self) -> Optional[float]:
        return self._nominal_current

    @property
    def connected(self) -> bool:
        return self._transport is not None

    # -- Context manager -----------------------------------------------------

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # -- Connection lifecycle ------------------------------------------------

    def connect(self):
        """Open the serial link and cache the nominal voltage and current."""
        if self._transport is None:
            self._transport = SerialTransport(self._port, self._baud, self._timeout)
        try:
            self._nominal_voltage = self.get_nominal_voltage()
            self._nominal_current = self.get_nominal_current()
        except Exception:
            self.close()
            raise
        LOGGER.info(
            "Connected to %s (Unom=%.2f V, Inom=%.2f A)",
            self._port, self._nominal_voltage, self._nominal_current,
        )

    def close(self):
        """Close the link. Output state on the device is left untouched."""
        if self._transport is not None:
            self._transport.close()
            LOGGER.info("Closed %s", self._port)
        self._transport = None

    # -- Low-level I/O -------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TransportError("Not connected. Call connect() first.")
        return self._transport

    def _query(self, register: Register, node: Node = Node.OUTPUT1,
               payload: Optional[bytes] = None) -> bytes:
        """Run one request/reply exchange and return the reply payload."""
        telegram = Telegram(register, node, payload or b"")
        frame = telegram.wrap()
        transport = self._require_transport()
        with self._lock:
            LOGGER.debug("sending  %s, expecting %d byte(s)",
                         frame.hex(" "), telegram.reply_length)
            transport.write(frame)
            reply = transport.read_exactly(telegram.reply_length)
            LOGGER.debug("received %s", reply.hex(" "))
            if telegram.writing:
                # set telegrams are followed by an extra "FF 00 01 7F" frame
                transport.discard_pending_input()
        return telegram.unwrap(reply)

    def _require_nominals(self) -> tuple[float, float]:
        if self._nominal_voltage is None or self._nominal_current is None:
            raise PS2000Error("Nominal values unknown. Call connect() first.")
        return self._nominal_voltage, self._nominal_current

    # -- Identification ------------------------------------------------------

    def get_device_type(self) -> str:
        return parse_string(self._query(Register.DEVICE_TYPE))

    def get_serial_number(self) -> str:
        return parse_string(self._query(Register.SERIAL_NUMBER))

    def get_article_number(self) -> str:
        return parse_string(self._query(Register.ARTICLE_NUMBER))

    def get_manufacturer(self) -> str:
        return parse_string(self._query(Register.MANUFACTURER))

    def get_software_version(self) -> str:
        return parse_string(self._query(Register.SOFTWARE_VERSION))

    def get_device_info(self) -> dict:
        """Read all identification strings."""
        return {
            "device_type": self.get_device_type(),
            "serial_number": self.get_serial_number(),
            "article_number": self.get_article_number(),
            "manufacturer": self.get_manufacturer(),
            "software_version": self.get_software_version(),
        }

    # -- Nominal ratings -----------------------------------------------------

    def get_nominal_voltage(self) -> float:
        return parse_float(self._query(Register.NOMINAL_VOLTAGE))

    def get_nominal_current(self) -> float:
        return parse_float(self._query(Register.NOMINAL_CURRENT))

    def get_nominal_power(self) -> float:
        return parse_float(self._query(Register.NOMINAL_POWER))

    # -- Control -------------------------------------------------------------

    def set_remote_control(self, node: Node, enable: bool):
        """Switch the output between remote (PC) and local (front panel) control."""
        word = PSU_CTRL_REMOTE_ON if enable else PSU_CTRL_REMOTE_OFF
        self._query(Register.POWER_SUPPLY_CONTROL, node, word)

    def set_output(self, node: Node, enable: bool):
        word = PSU_CTRL_OUTPUT_ON if enable else PSU_CTRL_OUTPUT_OFF
        self._query(Register.POWER_SUPPLY_CONTROL, node, word)

    def set_tracking(self, node: Node, enable: bool):
        word = PSU_CTRL_TRACKING_ON if enable else PSU_CTRL_TRACKING_OFF
        self._query(Register.POWER_SUPPLY_CONTROL, node, word)

    def acknowledge_alarms(self, node: Node):
        self._query(Register.POWER_SUPPLY_CONTROL, node, PSU_CTRL_ACK_ALARMS)

    # -- Set values ----------------------------------------------------------

    def set_voltage(self, node: Node, volts: float):
        """Set the voltage on one output.

        NOTE: the device lowers the voltage on its own to stay within its
        power limit.
        """
        nominal, _ = self._require_nominals()
        if volts < 0 or volts > nominal:
            raise ValueError(f"Voltage {volts:.3f}V out of range [0, {nominal:.1f}V]")
        self._query(Register.SET_VALUE_VOLTAGE, node, encode_percent(volts, nominal))

    def set_current(self, node: Node, amps: float):
        """Set the current limit on one output."""
        _, nominal = self._require_nominals()
        if amps < 0 or amps > nominal:
            raise ValueError(f"Current {amps:.3f}A out of range [0, {nominal:.1f}A]")
        self._query(Register.SET_VALUE_CURRENT, node, encode_percent(amps, nominal))

    # -- Status --------------------------------------------------------------

    def _read_channel(self, register: Register, node: Node) -> ChannelStatus:
        nominal_voltage, nominal_current = self._require_nominals()
        reply = self._query(register, node)
        return ChannelStatus(
            voltage=nominal_voltage * decode_percent(reply, 2),
            current=nominal_current * decode_percent(reply, 4),
            remote=reply[0] != 0,
            flags=reply[1],
        )

    def read_status(self, node: Node) -> ChannelStatus:
        """Read actual voltage/current and the status byte of one output."""
        return self._read_channel(Register.STATUS_ACTUAL, node)

    def read_settings(self, node: Node) -> ChannelStatus:
        """Read the set values and the status byte of one output."""
        return self._read_channel(Register.STATUS_SET, node)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------
def _cli():
    import argparse
    import json as _json
    import sys

    parser = argparse.ArgumentParser(
        prog="ps2000",
        description="EA PS 2000 B command-line interface",
    )
    parser.add_argument(
        "-p", "--port",
        default=DEFAULT_PORT,
        help="serial port (default: %(default)s)",
    )
    parser.add_argument(
        "-b", "--baud",
        type=int,
        default=DEFAULT_BAUD,
        help="baud rate (default: %(default)s)",
    )
    parser.add_argument(
        "-n", "--output",
        type=int,
        choices=(1, 2),
        default=1,
        help="output channel (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log every telegram",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- info / readings -----------------------------------------------------
    sub.add_parser("info", help="show device identification and ratings")
    sub.add_parser("status", help="read actual values and status (JSON)")
    sub.add_parser("settings", help="read set values and status (JSON)")

    # -- set values ----------------------------------------------------------
    p = sub.add_parser("set-voltage", help="set output voltage")
    p.add_argument("volts", type=float)

    p = sub.add_parser("set-current", help="set current limit")
    p.add_argument("amps", type=float)

    # -- control -------------------------------------------------------------
    sub.add_parser("on", help="enable output")
    sub.add_parser("off", help="disable output")
    sub.add_parser("remote", help="enable remote control")
    sub.add_parser("local", help="return to front panel control")
    sub.add_parser("tracking-on", help="enable tracking mode")
    sub.add_parser("tracking-off", help="disable tracking mode")
    sub.add_parser("ack-alarms", help="acknowledge protection alarms")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    node = Node(args.output - 1)

    try:
        with PS2000(args.port, baud=args.baud) as psu:
            cmd = args.command

            if cmd == "info":
                for key, value in psu.get_device_info().items():
                    print(f"{key + ':':18}{value}")
                print(f"{'nominal_voltage:':18}{psu.nominal_voltage:.1f} V")
                print(f"{'nominal_current:':18}{psu.nominal_current:.1f} A")
                print(f"{'nominal_power:':18}{psu.get_nominal_power():.1f} W")

            elif cmd == "status":
                print(_json.dumps(psu.read_status(node).as_dict(), indent=2))
            elif cmd == "settings":
                print(_json.dumps(psu.read_settings(node).as_dict(), indent=2))

            elif cmd == "set-voltage":
                psu.set_voltage(node, args.volts)
                print(f"Voltage: {args.volts:.3f} V")
            elif cmd == "set-current":
                psu.set_current(node, args.amps)
                print(f"Current limit: {args.amps:.3f} A")

            elif cmd == "on":
                psu.set_output(node, True)
                print("Output ON")
            elif cmd == "off":
                psu.set_output(node, False)
                print("Output OFF")
            elif cmd == "remote":
                psu.set_remote_control(node, True)
                print("Remote control ON")
            elif cmd == "local":
                psu.set_remote_control(node, False)
                print("Remote control OFF")
            elif cmd == "tracking-on":
                psu.set_tracking(node, True)
                print("Tracking ON")
            elif cmd == "tracking-off":
                psu.set_tracking(node, False)
                print("Tracking OFF")
            elif cmd == "ack-alarms":
                psu.acknowledge_alarms(node)
                print("Alarms acknowledged")

    except (ValueError, PS2000Error) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    _cli()
