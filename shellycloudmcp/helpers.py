from typing import Any, Mapping, Optional

from .const import CATEGORY_RULES, THERMOSTAT_CODE, UNKNOWN_CATEGORY
from .exceptions import InvalidResponseError


def _number(section: Mapping[str, Any], key: str, path: str) -> Optional[float]:
    v = section.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise InvalidResponseError(f"{path}.{key}: expected number, got {type(v).__name__}")
    return float(v)


def _string(section: Mapping[str, Any], key: str, path: str) -> Optional[str]:
    v = section.get(key)
    if v is None:
        return None
    if not isinstance(v, str):
        raise InvalidResponseError(f"{path}.{key}: expected string, got {type(v).__name__}")
    return v


def _boolean(section: Mapping[str, Any], key: str, path: str) -> Optional[bool]:
    v = section.get(key)
    if v is None:
        return None
    if not isinstance(v, bool):
        raise InvalidResponseError(f"{path}.{key}: expected boolean, got {type(v).__name__}")
    return v


def _section(payload: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    v = payload.get(key)
    if v is None:
        return {}
    if not isinstance(v, Mapping):
        raise InvalidResponseError(f"{path}.{key}: expected object, got {type(v).__name__}")
    return v


def _as_mapping(v: Any) -> Mapping[str, Any]:
    return v if isinstance(v, Mapping) else {}


def _to_str_or_none(v: Any) -> Optional[str]:
    s = str(v).strip() if v is not None else None
    return s or None


def _celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def _category_from_code(code: Optional[str]) -> str:
    if not code:
        return UNKNOWN_CATEGORY
    for fragment, category in CATEGORY_RULES:
        if fragment in code:
            return category
    if code == THERMOSTAT_CODE:
        return "thermostat"
    return code.lower()


def _mask_secret(secret: str) -> str:
    if len(secret) <= 4:
        return "..."
    return f"{secret[:4]}..."
