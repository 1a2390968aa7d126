"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@author : Aymen Brahim Djelloul
version : 1.0
date    : 18.10.2026
License : MIT

    // Typed battery snapshot returned by the reader.
    // Every unknown value is None, a zero is always a real reading.

"""

# IMPORTS
import re
import sys
from enum import Enum
from datetime import timedelta
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# A battery is addressed by its device directory name, e.g. 'BAT0'
BatteryId = str


class ChargingState(Enum):
    """ Charging state carried straight from the device text"""

    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    FULL = "Full"
    NOT_CHARGING = "Not charging"
    UNKNOWN = "Unknown"

    @classmethod
    def from_text(cls, text: Optional[str]) -> "ChargingState":
        """
        Map a raw state string to a ChargingState.

        Matching is case-insensitive and treats '_', '-' and runs of spaces alike,
        so 'Not charging', 'not_charging' and 'NOT-CHARGING' are the same state.
        Anything unrecognized maps to UNKNOWN, this never fails.
        """
        if not text:
            return cls.UNKNOWN

        normalized: str = re.sub(r"[\s_\-]+", " ", text).strip().lower()
        return _STATE_TEXT.get(normalized, cls.UNKNOWN)


# procfs says 'charged' where sysfs says 'Full'
_STATE_TEXT: Dict[str, ChargingState] = {
    "charging": ChargingState.CHARGING,
    "discharging": ChargingState.DISCHARGING,
    "full": ChargingState.FULL,
    "charged": ChargingState.FULL,
    "not charging": ChargingState.NOT_CHARGING,
}


@dataclass(frozen=True)
class BatteryStaticInfo:
    """ Informational battery fields, read once per reporting cycle"""

    design_capacity: int
    last_full_capacity: int
    technology: Optional[str] = None
    vendor: Optional[str] = None
    model: Optional[str] = None
    serial: Optional[str] = None
    voltage_design: Optional[int] = None
    capacity_unit: Optional[str] = None


@dataclass(frozen=True)
class BatteryDynamicState:
    """ Battery fields that change between reads"""

    present: bool = True
    state: ChargingState = ChargingState.UNKNOWN
    remaining_capacity: Optional[int] = None
    present_rate: Optional[int] = None
    voltage: Optional[int] = None


@dataclass(frozen=True)
class BatteryReport:
    """
    One battery as seen in one reporting cycle.

    Raw values live in `static` and `dynamic`, both None when the battery is
    not present. `percentage`, `time_remaining` and `health` are derived by
    the reader and are None whenever they can't be computed honestly.
    """

    id: BatteryId
    present: bool
    static: Optional[BatteryStaticInfo] = None
    dynamic: Optional[BatteryDynamicState] = None
    percentage: Optional[float] = None
    time_remaining: Optional[timedelta] = None
    health: Optional[float] = None

    @classmethod
    def absent(cls, battery_id: BatteryId) -> "BatteryReport":
        """ Report for a battery slot whose device says it is not present"""
        return cls(id=battery_id, present=False)

    @property
    def state(self) -> ChargingState:
        return self.dynamic.state if self.dynamic else ChargingState.UNKNOWN

    @property
    def design_capacity(self) -> Optional[int]:
        return self.static.design_capacity if self.static else None

    @property
    def last_full_capacity(self) -> Optional[int]:
        return self.static.last_full_capacity if self.static else None

    @property
    def capacity_unit(self) -> Optional[str]:
        return self.static.capacity_unit if self.static else None

    @property
    def remaining_capacity(self) -> Optional[int]:
        return self.dynamic.remaining_capacity if self.dynamic else None

    @property
    def present_rate(self) -> Optional[int]:
        return self.dynamic.present_rate if self.dynamic else None

    @property
    def voltage(self) -> Optional[int]:
        return self.dynamic.voltage if self.dynamic else None

    def as_dict(self) -> Dict[str, Any]:
        """ Return the report as a JSON-serializable dictionary"""
        return {
            "id": self.id,
            "present": self.present,
            "state": self.state.value,
            "percentage": self.percentage,
            "time_remaining": None if self.time_remaining is None else int(self.time_remaining.total_seconds()),
            "health": self.health,
            "static": asdict(self.static) if self.static else None,
            "dynamic": None if self.dynamic is None else {**asdict(self.dynamic), "state": self.dynamic.state.value},
        }


if __name__ == "__main__":
    sys.exit()
