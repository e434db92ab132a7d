"""Plain-text rendering of tool results."""

from __future__ import annotations

from typing import List, Sequence

from .model import (
    BatteryStatus,
    DeviceStatus,
    EnergyMeterStatus,
    HumidityStatus,
    LightStatus,
    ShellyDevice,
    SwitchStatus,
    TemperatureReading,
    TemperatureSensor,
)


def format_device_list(devices: Sequence[ShellyDevice]) -> str:
    if not devices:
        return "No devices found. Make sure you have devices added to your Shelly Cloud account."
    entries = []
    for device in devices:
        state = "🟢 Online" if device.online else "🔴 Offline"
        entries.append(
            f"• {device.name} ({device.id})\n"
            f"  Type: {device.category}\n"
            f"  Model: {device.model or 'Unknown'}\n"
            f"  Status: {state}"
        )
    return f"Found {len(devices)} device(s):\n\n" + "\n\n".join(entries)


def format_temperature(device: ShellyDevice, reading: TemperatureReading, unit: str) -> str:
    if unit == "fahrenheit":
        value = f"{reading.fahrenheit:.1f}°F"
    elif unit == "both":
        value = f"{reading.celsius:.1f}°C ({reading.fahrenheit:.1f}°F)"
    else:
        value = f"{reading.celsius:.1f}°C"
    return f"Temperature at '{device.name}': {value}"


def _format_uptime(seconds: float) -> str:
    hours = int(seconds // 3600)
    return f"{hours // 24}d {hours % 24}h"


def _network_lines(status: DeviceStatus) -> List[str]:
    wifi = status.wifi
    if wifi.ssid or wifi.sta_ip:
        lines = [
            "Network:",
            f"• WiFi SSID: {wifi.ssid or 'N/A'}",
            f"• IP Address: {wifi.sta_ip or 'N/A'}",
        ]
        if wifi.rssi:
            lines.append(f"• Signal Strength: {wifi.rssi:g} dBm")
        return lines
    if status.eth.ip:
        return ["Network:", f"• Ethernet IP: {status.eth.ip}"]
    return []


def _system_lines(status: DeviceStatus) -> List[str]:
    sys = status.sys
    lines = []
    if sys.uptime:
        lines.append(f"• Uptime: {_format_uptime(sys.uptime)}")
    if sys.ram_free and sys.ram_size:
        used = (sys.ram_size - sys.ram_free) / sys.ram_size * 100
        lines.append(f"• RAM Usage: {used:.1f}%")
    if sys.stable_update:
        lines.append(f"• Update Available: {sys.stable_update}")
    return ["System:", *lines] if lines else []


def format_device_status(device: ShellyDevice, status: DeviceStatus) -> str:
    """Render the status report for an online device."""
    sections = [
        [
            f"Status for '{device.name}' ({device.category}):",
            f"• Device ID: {device.id}",
            f"• Model: {device.model or 'Unknown'}",
            "• Online: ✅",
        ],
        _network_lines(status),
        _system_lines(status),
    ]

    sensor = status.component("temperature:0")
    has_sensor = isinstance(sensor, TemperatureSensor) and sensor.reading is not None
    if has_sensor:
        sections.append(
            [
                "Temperature:",
                f"• {sensor.reading.celsius:.1f}°C ({sensor.reading.fahrenheit:.1f}°F)",
            ]
        )

    lights = [c for c in (status.component(f"light:{i}") for i in range(2)) if isinstance(c, LightStatus)]
    if lights:
        lines = ["Lights:"]
        for light in lights:
            line = f"• Channel {light.index}: {'💡 ON' if light.output else '⚫ OFF'}"
            if light.brightness is not None:
                line += f" ({light.brightness:g}% brightness)"
            if light.apower is not None:
                line += f" - {light.apower:.1f}W"
            if light.temperature is not None and not has_sensor:
                line += f" - {light.temperature.celsius:.1f}°C"
            lines.append(line)
        sections.append(lines)

    switches = [c for c in (status.component(f"switch:{i}") for i in range(4)) if isinstance(c, SwitchStatus)]
    if switches:
        lines = ["Switches/Relays:"]
        for sw in switches:
            line = f"• Channel {sw.index}: {'🔌 ON' if sw.output else '⭕ OFF'}"
            if sw.apower is not None:
                line += f" - {sw.apower:.1f}W"
            if sw.voltage is not None:
                line += f" - {sw.voltage:.1f}V"
            if sw.current is not None and sw.current > 0:
                line += f" - {sw.current:.3f}A"
            if sw.temperature is not None and not has_sensor:
                line += f" - {sw.temperature.celsius:.1f}°C"
            lines.append(line)
        sections.append(lines)

    em = status.component("em:0")
    if isinstance(em, EnergyMeterStatus):
        lines = ["Energy Meter:"]
        if em.total_act_power is not None:
            lines.append(f"• Total Power: {em.total_act_power:.1f}W")
        for phase, reading in em.phases.items():
            lines.append(
                f"• Phase {phase.upper()}: {reading.act_power:.1f}W @ {reading.voltage or 0:.1f}V"
            )
        sections.append(lines)

    humidity = status.component("humidity:0")
    if isinstance(humidity, HumidityStatus) and humidity.rh is not None:
        sections.append(["Humidity:", f"• {humidity.rh:.1f}%"])

    battery = status.component("devicepower:0")
    if isinstance(battery, BatteryStatus) and battery.percent is not None:
        sections.append(
            [
                "Battery:",
                f"• Level: {battery.percent:g}%",
                f"• Voltage: {battery.voltage:g}V" if battery.voltage is not None else "• Voltage: N/A",
            ]
        )

    return "\n\n".join("\n".join(lines) for lines in sections if lines)
