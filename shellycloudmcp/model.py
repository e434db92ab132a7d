"""Data classes for Shelly Cloud devices and status payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(slots=True, frozen=True)
class ShellyDevice:
    """Inventory entry for one device on the account."""

    id: str
    name: str
    category: str
    online: bool
    model: Optional[str] = None
    gen: Optional[str] = None
    mac: Optional[str] = None


@dataclass(slots=True, frozen=True)
class InventorySnapshot:
    """Devices from a single inventory call, keyed by id."""

    devices: Mapping[str, ShellyDevice]
    fetched_at: float


@dataclass(slots=True, frozen=True)
class TemperatureReading:
    celsius: float
    fahrenheit: float


# ----------------------------------------------------------------------
# Fixed sections
# ----------------------------------------------------------------------
@dataclass(slots=True)
class WifiStatus:
    sta_ip: Optional[str] = None
    ssid: Optional[str] = None
    rssi: Optional[float] = None
    status: Optional[str] = None


@dataclass(slots=True)
class EthStatus:
    ip: Optional[str] = None


@dataclass(slots=True)
class SysStatus:
    mac: Optional[str] = None
    uptime: Optional[float] = None
    ram_size: Optional[float] = None
    ram_free: Optional[float] = None
    fs_size: Optional[float] = None
    fs_free: Optional[float] = None
    restart_required: Optional[bool] = None
    stable_update: Optional[str] = None
    beta_update: Optional[str] = None


# ----------------------------------------------------------------------
# Components keyed by "<type>:<index>"
# ----------------------------------------------------------------------
@dataclass(slots=True)
class SwitchStatus:
    index: int
    output: Optional[bool] = None
    apower: Optional[float] = None
    voltage: Optional[float] = None
    current: Optional[float] = None
    temperature: Optional[TemperatureReading] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class LightStatus:
    index: int
    output: Optional[bool] = None
    brightness: Optional[float] = None
    apower: Optional[float] = None
    temperature: Optional[TemperatureReading] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class TemperatureSensor:
    index: int
    reading: Optional[TemperatureReading] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class PhaseReading:
    act_power: Optional[float] = None
    voltage: Optional[float] = None


@dataclass(slots=True)
class EnergyMeterStatus:
    index: int
    total_act_power: Optional[float] = None
    phases: Dict[str, PhaseReading] = field(default_factory=dict)
    temperature: Optional[TemperatureReading] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class HumidityStatus:
    index: int
    rh: Optional[float] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class BatteryStatus:
    index: int
    percent: Optional[float] = None
    voltage: Optional[float] = None
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class UnknownComponent:
    """Component the client does not interpret; kept as received."""

    raw: Any


Component = Union[
    SwitchStatus,
    LightStatus,
    TemperatureSensor,
    EnergyMeterStatus,
    HumidityStatus,
    BatteryStatus,
    UnknownComponent,
]


@dataclass(slots=True)
class DeviceStatus:
    """Normalized view of one device status envelope."""

    id: str
    code: Optional[str] = None
    cloud_connected: Optional[bool] = None
    wifi: WifiStatus = field(default_factory=WifiStatus)
    eth: EthStatus = field(default_factory=EthStatus)
    sys: SysStatus = field(default_factory=SysStatus)
    components: Dict[str, Component] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    def component(self, key: str) -> Optional[Component]:
        return self.components.get(key)
