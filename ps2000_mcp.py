#!/usr/bin/env python3
"""
EA PS 2000 B MCP Server

Exposes a PS 2000 B power supply as MCP tools for LLM-driven control.

Requires: Python 3.10+, fastmcp (`pip install fastmcp`), pyserial

Run:
    python ps2000_mcp.py                      # stdio transport (default)
"""

import json
from typing import Optional

from fastmcp import FastMCP

from ps2000 import PS2000, Node

mcp = FastMCP(
    "EA PS 2000 B Power Supply",
    instructions=(
        "Controls an EA PS 2000 B programmable DC power supply via USB serial. "
        "Always connect() first. The device only accepts set values while "
        "remote control is enabled on the output, so call "
        "set_remote_control(output, true) before setting voltage or current. "
        "Outputs are numbered 1 and 2; single-output models only have 1. "
        "Voltage and current are validated against the device's nominal ratings."
    ),
)

# Global device handle — one connection at a time
_psu: Optional[PS2000] = None


def _require_connection() -> PS2000:
    if _psu is None:
        raise RuntimeError("Not connected. Call connect() first.")
    return _psu


def _node(output: int) -> Node:
    if output not in (1, 2):
        raise ValueError(f"Output must be 1 or 2, got {output}")
    return Node(output - 1)


def _fmt(value: float, decimals: int = 3) -> float:
    """Round a float for clean JSON output."""
    return round(value, decimals)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
def connect(port: str) -> str:
    """Connect to the PS 2000 B power supply.

    Opens the serial link and reads the nominal voltage and current, which
    are needed to convert set values.

    Args:
        port: Serial port path, e.g. "/dev/ttyACM0" (Linux) or "COM3" (Windows).
    """
    global _psu
    if _psu is not None:
        return json.dumps({"error": "Already connected. disconnect() first."})

    psu = PS2000(port)
    psu.connect()
    _psu = psu

    return json.dumps({
        "status": "connected",
        "nominal_voltage": _fmt(psu.nominal_voltage, 1),
        "nominal_current": _fmt(psu.nominal_current, 1),
    })


@mcp.tool()
def disconnect() -> str:
    """Close the serial link. The output state of the device is not changed."""
    global _psu
    if _psu is None:
        return json.dumps({"status": "already disconnected"})

    _psu.close()
    _psu = None
    return json.dumps({"status": "disconnected"})


@mcp.tool()
def device_info() -> str:
    """Read device type, serial number, article number, manufacturer,
    software version and the nominal ratings."""
    psu = _require_connection()
    info = psu.get_device_info()
    info["nominal_voltage"] = _fmt(psu.nominal_voltage, 1)
    info["nominal_current"] = _fmt(psu.nominal_current, 1)
    info["nominal_power"] = _fmt(psu.get_nominal_power(), 1)
    return json.dumps(info)


def _status_json(status) -> str:
    state = status.as_dict()
    state["voltage"] = _fmt(state["voltage"], 2)
    state["current"] = _fmt(state["current"], 3)
    return json.dumps(state)


@mcp.tool()
def read_status(output: int = 1) -> str:
    """Read the measured voltage and current of an output plus its status.

    Status includes remote control state, output on/off, CV/CC mode,
    tracking and any active protection (OVP/OCP/OPP/OTP).

    Args:
        output: Output number, 1 or 2.
    """
    psu = _require_connection()
    return _status_json(psu.read_status(_node(output)))


@mcp.tool()
def read_settings(output: int = 1) -> str:
    """Read the voltage and current set values of an output plus its status.

    Args:
        output: Output number, 1 or 2.
    """
    psu = _require_connection()
    return _status_json(psu.read_settings(_node(output)))


@mcp.tool()
def set_voltage(volts: float, output: int = 1) -> str:
    """Set the output voltage.

    Validated against the nominal voltage. The device lowers the voltage on
    its own if it would exceed the power limit.

    Args:
        volts: Desired voltage in volts (0 to nominal voltage).
        output: Output number, 1 or 2.
    """
    psu = _require_connection()
    psu.set_voltage(_node(output), volts)
    return json.dumps({"status": "ok", "output": output, "voltage": _fmt(volts, 3)})


@mcp.tool()
def set_current(amps: float, output: int = 1) -> str:
    """Set the current limit.

    Args:
        amps: Desired current limit in amps (0 to nominal current).
        output: Output number, 1 or 2.
    """
    psu = _require_connection()
    psu.set_current(_node(output), amps)
    return json.dumps({"status": "ok", "output": output, "current": _fmt(amps, 3)})


@mcp.tool()
def output_on(output: int = 1) -> str:
    """Enable an output with its current set values."""
    psu = _require_connection()
    psu.set_output(_node(output), True)
    return json.dumps({"status": "ok", "output": output, "state": "on"})


@mcp.tool()
def output_off(output: int = 1) -> str:
    """Disable an output. Set values are preserved."""
    psu = _require_connection()
    psu.set_output(_node(output), False)
    return json.dumps({"status": "ok", "output": output, "state": "off"})


@mcp.tool()
def set_remote_control(enable: bool, output: int = 1) -> str:
    """Switch an output between remote (PC) and local (front panel) control.

    Args:
        enable: True for remote control, False to return to the front panel.
        output: Output number, 1 or 2.
    """
    psu = _require_connection()
    psu.set_remote_control(_node(output), enable)
    return json.dumps({"status": "ok", "output": output, "remote": enable})


@mcp.tool()
def acknowledge_alarms(output: int = 1) -> str:
    """Acknowledge protection alarms (OVP/OCP/OPP/OTP) on an output."""
    psu = _require_connection()
    psu.acknowledge_alarms(_node(output))
    return json.dumps({"status": "ok", "output": output, "alarms": "acknowledged"})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    mcp.run()
