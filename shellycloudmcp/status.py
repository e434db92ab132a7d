"""Normalization of per-device status envelopes.

Status payloads vary by model and firmware generation.  Telemetry lives in
components keyed ``"<type>:<index>"`` (``switch:0``, ``light:1``, ``em:0`` ...).
Known component types are parsed into dataclasses; anything else is kept as an
:class:`UnknownComponent` or in :attr:`DeviceStatus.extra` without validation.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from .const import TEMPERATURE_SOURCES
from .exceptions import InvalidResponseError
from .helpers import _boolean, _celsius_to_fahrenheit, _number, _section, _string
from .model import (
    BatteryStatus,
    Component,
    DeviceStatus,
    EnergyMeterStatus,
    EthStatus,
    HumidityStatus,
    LightStatus,
    PhaseReading,
    SwitchStatus,
    SysStatus,
    TemperatureReading,
    TemperatureSensor,
    UnknownComponent,
    WifiStatus,
)

_FIXED_SECTIONS = {"id", "code", "cloud", "wifi", "eth", "sys"}


def _temperature(section: Mapping[str, Any], path: str) -> Optional[TemperatureReading]:
    celsius = _number(section, "tC", path)
    if celsius is None:
        return None
    fahrenheit = _number(section, "tF", path)
    if fahrenheit is None:
        fahrenheit = _celsius_to_fahrenheit(celsius)
    return TemperatureReading(celsius=celsius, fahrenheit=fahrenheit)


def _embedded_temperature(
    data: Mapping[str, Any], path: str
) -> Optional[TemperatureReading]:
    return _temperature(_section(data, "temperature", path), f"{path}.temperature")


def _parse_switch(index: int, data: Mapping[str, Any], path: str) -> SwitchStatus:
    return SwitchStatus(
        index=index,
        output=_boolean(data, "output", path),
        apower=_number(data, "apower", path),
        voltage=_number(data, "voltage", path),
        current=_number(data, "current", path),
        temperature=_embedded_temperature(data, path),
        raw=data,
    )


def _parse_light(index: int, data: Mapping[str, Any], path: str) -> LightStatus:
    return LightStatus(
        index=index,
        output=_boolean(data, "output", path),
        brightness=_number(data, "brightness", path),
        apower=_number(data, "apower", path),
        temperature=_embedded_temperature(data, path),
        raw=data,
    )


def _parse_temperature_sensor(
    index: int, data: Mapping[str, Any], path: str
) -> TemperatureSensor:
    return TemperatureSensor(index=index, reading=_temperature(data, path), raw=data)


def _parse_energy_meter(
    index: int, data: Mapping[str, Any], path: str
) -> EnergyMeterStatus:
    phases: Dict[str, PhaseReading] = {}
    for phase in ("a", "b", "c"):
        act_power = _number(data, f"{phase}_act_power", path)
        if act_power is None:
            continue
        phases[phase] = PhaseReading(
            act_power=act_power, voltage=_number(data, f"{phase}_voltage", path)
        )
    return EnergyMeterStatus(
        index=index,
        total_act_power=_number(data, "total_act_power", path),
        phases=phases,
        temperature=_embedded_temperature(data, path),
        raw=data,
    )


def _parse_humidity(index: int, data: Mapping[str, Any], path: str) -> HumidityStatus:
    return HumidityStatus(index=index, rh=_number(data, "rh", path), raw=data)


def _parse_battery(index: int, data: Mapping[str, Any], path: str) -> BatteryStatus:
    battery = _section(data, "battery", path)
    return BatteryStatus(
        index=index,
        percent=_number(battery, "percent", f"{path}.battery"),
        voltage=_number(battery, "V", f"{path}.battery"),
        raw=data,
    )


_COMPONENT_PARSERS: Dict[str, Callable[[int, Mapping[str, Any], str], Component]] = {
    "switch": _parse_switch,
    "light": _parse_light,
    "temperature": _parse_temperature_sensor,
    "em": _parse_energy_meter,
    "humidity": _parse_humidity,
    "devicepower": _parse_battery,
}


def _parse_component(key: str, value: Any) -> Component:
    kind, _, raw_index = key.partition(":")
    parser = _COMPONENT_PARSERS.get(kind)
    if parser is None or not raw_index.isdigit():
        return UnknownComponent(raw=value)
    if not isinstance(value, Mapping):
        raise InvalidResponseError(
            f"{key}: expected object, got {type(value).__name__}"
        )
    return parser(int(raw_index), value, key)


def _parse_sys(payload: Mapping[str, Any]) -> SysStatus:
    sys_data = _section(payload, "sys", "sys")
    updates = _section(sys_data, "available_updates", "sys")
    stable = _section(updates, "stable", "sys.available_updates")
    beta = _section(updates, "beta", "sys.available_updates")
    return SysStatus(
        mac=_string(sys_data, "mac", "sys"),
        uptime=_number(sys_data, "uptime", "sys"),
        ram_size=_number(sys_data, "ram_size", "sys"),
        ram_free=_number(sys_data, "ram_free", "sys"),
        fs_size=_number(sys_data, "fs_size", "sys"),
        fs_free=_number(sys_data, "fs_free", "sys"),
        restart_required=_boolean(sys_data, "restart_required", "sys"),
        stable_update=_string(stable, "version", "sys.available_updates.stable"),
        beta_update=_string(beta, "version", "sys.available_updates.beta"),
    )


def parse_device_status(device_id: str, payload: Mapping[str, Any]) -> DeviceStatus:
    """Build a :class:`DeviceStatus` from a raw ``device_status`` mapping.

    Raises :class:`InvalidResponseError` when a field the client reads has the
    wrong type.  Unknown keys are passed through untouched.
    """
    wifi = _section(payload, "wifi", "wifi")
    eth = _section(payload, "eth", "eth")
    cloud = _section(payload, "cloud", "cloud")

    components: Dict[str, Component] = {}
    extra: Dict[str, Any] = {}
    for key, value in payload.items():
        if key in _FIXED_SECTIONS:
            continue
        if ":" in key:
            components[key] = _parse_component(key, value)
        else:
            extra[key] = value

    return DeviceStatus(
        id=device_id,
        code=_string(payload, "code", "status"),
        cloud_connected=_boolean(cloud, "connected", "cloud"),
        wifi=WifiStatus(
            sta_ip=_string(wifi, "sta_ip", "wifi"),
            ssid=_string(wifi, "ssid", "wifi"),
            rssi=_number(wifi, "rssi", "wifi"),
            status=_string(wifi, "status", "wifi"),
        ),
        eth=EthStatus(ip=_string(eth, "ip", "eth")),
        sys=_parse_sys(payload),
        components=components,
        extra=extra,
    )


def find_temperature(status: DeviceStatus) -> Optional[TemperatureReading]:
    """Return the first temperature found, or None when the device has none.

    Search order: dedicated sensor, switch channels 0-3, light channels 0-1,
    then the energy meter.
    """
    for key in TEMPERATURE_SOURCES:
        component = status.components.get(key)
        if isinstance(component, TemperatureSensor):
            reading = component.reading
        elif isinstance(component, (SwitchStatus, LightStatus, EnergyMeterStatus)):
            reading = component.temperature
        else:
            reading = None
        if reading is not None:
            return reading
    return None
