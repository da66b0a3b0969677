"""Persisted GUI configuration: application settings and flashing customizations."""

from __future__ import annotations

import getpass
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar, Union

_T = TypeVar("_T")


def _ensure_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type for {what}: expected an object")
    return data


def _check_type(key: str, value: Any, kind: type) -> Any:
    if not isinstance(value, kind):
        raise ValueError(f"invalid type for field `{key}`: expected {kind.__name__}")
    return value


def _optional(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    return _check_type(key, value, kind)


def _required(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return _check_type(key, data[key], kind)


def _optional_obj(data: Mapping[str, Any], key: str, cls: Type[_T]) -> Optional[_T]:
    value = data.get(key)
    if value is None:
        return None
    return cls.from_dict(value)  # type: ignore[attr-defined]


def _compact(pairs: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields and serialise nested objects."""
    out: dict[str, Any] = {}
    for key, value in pairs.items():
        if value is None:
            continue
        out[key] = value.to_dict() if hasattr(value, "to_dict") else value
    return out


@dataclass
class AppSettings:
    """Application-wide settings."""

    skip_confirmation: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"skip_confirmation": self.skip_confirmation})

    @staticmethod
    def from_dict(data: Any) -> "AppSettings":
        data = _ensure_mapping(data, "AppSettings")
        return AppSettings(skip_confirmation=_optional(data, "skip_confirmation", bool))


@dataclass
class SdCustomizationUser:
    """User account to create on a flashed SD card."""

    username: str
    password: str

    @staticmethod
    def default() -> "SdCustomizationUser":
        """The current user's name with an empty password."""
        return SdCustomizationUser(getpass.getuser(), "")

    def validate_username(self) -> bool:
        return self.username != "root"

    def to_dict(self) -> dict[str, Any]:
        return {"username": self.username, "password": self.password}

    @staticmethod
    def from_dict(data: Any) -> "SdCustomizationUser":
        data = _ensure_mapping(data, "SdCustomizationUser")
        return SdCustomizationUser(
            username=_required(data, "username", str),
            password=_required(data, "password", str),
        )


@dataclass
class SdCustomizationWifi:
    """Wireless network to configure on a flashed SD card."""

    ssid: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"ssid": self.ssid, "password": self.password}

    @staticmethod
    def from_dict(data: Any) -> "SdCustomizationWifi":
        data = _ensure_mapping(data, "SdCustomizationWifi")
        return SdCustomizationWifi(
            ssid=_required(data, "ssid", str),
            password=_required(data, "password", str),
        )


@dataclass
class SdSysconfCustomization:
    """System configuration written to a Linux SD card image."""

    hostname: Optional[str] = None
    timezone: Optional[str] = None
    keymap: Optional[str] = None
    user: Optional[SdCustomizationUser] = None
    wifi: Optional[SdCustomizationWifi] = None
    ssh: Optional[str] = None
    usb_enable_dhcp: Optional[bool] = None

    @staticmethod
    def default() -> "SdSysconfCustomization":
        """Empty customization; USB DHCP is enabled by default on macOS."""
        return SdSysconfCustomization(
            usb_enable_dhcp=True if sys.platform == "darwin" else None
        )

    def validate_user(self) -> bool:
        return self.user is None or self.user.validate_username()

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "hostname": self.hostname,
                "timezone": self.timezone,
                "keymap": self.keymap,
                "user": self.user,
                "wifi": self.wifi,
                "ssh": self.ssh,
                "usb_enable_dhcp": self.usb_enable_dhcp,
            }
        )

    @staticmethod
    def from_dict(data: Any) -> "SdSysconfCustomization":
        data = _ensure_mapping(data, "SdSysconfCustomization")
        return SdSysconfCustomization(
            hostname=_optional(data, "hostname", str),
            timezone=_optional(data, "timezone", str),
            keymap=_optional(data, "keymap", str),
            user=_optional_obj(data, "user", SdCustomizationUser),
            wifi=_optional_obj(data, "wifi", SdCustomizationWifi),
            ssh=_optional(data, "ssh", str),
            usb_enable_dhcp=_optional(data, "usb_enable_dhcp", bool),
        )


@dataclass
class SdCustomization:
    """Customizations applied when flashing SD cards."""

    sysconf: Optional[SdSysconfCustomization] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"sysconf": self.sysconf})

    @staticmethod
    def from_dict(data: Any) -> "SdCustomization":
        data = _ensure_mapping(data, "SdCustomization")
        return SdCustomization(sysconf=_optional_obj(data, "sysconf", SdSysconfCustomization))


@dataclass
class BcfCustomization:
    """Customization for BeagleConnect Freedom flashing."""

    verify: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"verify": self.verify}

    @staticmethod
    def from_dict(data: Any) -> "BcfCustomization":
        data = _ensure_mapping(data, "BcfCustomization")
        return BcfCustomization(verify=_required(data, "verify", bool))


@dataclass
class Pb2Mspm0Customization:
    """Customization for PocketBeagle 2 MSPM0 flashing."""

    persist_eeprom: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"persist_eeprom": self.persist_eeprom}

    @staticmethod
    def from_dict(data: Any) -> "Pb2Mspm0Customization":
        data = _ensure_mapping(data, "Pb2Mspm0Customization")
        return Pb2Mspm0Customization(persist_eeprom=_required(data, "persist_eeprom", bool))


@dataclass
class GuiConfiguration:
    """Everything the GUI keeps between runs."""

    app_settings: Optional[AppSettings] = None
    sd_customization: Optional[SdCustomization] = None
    bcf_customization: Optional[BcfCustomization] = None
    pb2_mspm0_customization: Optional[Pb2Mspm0Customization] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "app_settings": self.app_settings,
                "sd_customization": self.sd_customization,
                "bcf_customization": self.bcf_customization,
                "pb2_mspm0_customization": self.pb2_mspm0_customization,
            }
        )

    @staticmethod
    def from_dict(data: Any) -> "GuiConfiguration":
        data = _ensure_mapping(data, "GuiConfiguration")
        return GuiConfiguration(
            app_settings=_optional_obj(data, "app_settings", AppSettings),
            sd_customization=_optional_obj(data, "sd_customization", SdCustomization),
            bcf_customization=_optional_obj(data, "bcf_customization", BcfCustomization),
            pb2_mspm0_customization=_optional_obj(
                data, "pb2_mspm0_customization", Pb2Mspm0Customization
            ),
        )

    def to_json(self) -> str:
        """Pretty-printed JSON form of the configuration."""
        return json.dumps(self.to_dict(), indent=2)

    @staticmethod
    def load(path: Union[str, Path]) -> "GuiConfiguration":
        """Read a configuration file; raises OSError if it cannot be read."""
        text = Path(path).read_text(encoding="utf-8")
        return GuiConfiguration.from_dict(json.loads(text))

    def save(self, path: Union[str, Path]) -> None:
        """Write the configuration, creating parent directories as needed."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_json(), encoding="utf-8")