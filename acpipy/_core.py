"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025, Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@author: Aymen Brahim Djelloul
version: 1.0
date: 18.10.2026
License: MIT

"""

# IMPORTS
import sys
from typing import Dict, Optional
from ._parser import FieldParser


class _Const:

    # DECLARE GLOBAL VARIABLES
    SYSFS_ROOT: str = "/sys/class/power_supply"
    PROCFS_ROOT: str = "/proc/acpi/battery"

    # sysfs power supply type of a battery
    BATTERY_TYPE: str = "battery"

    # uevent keys, 'POWER_SUPPLY_' prefix already dropped
    SYSFS_KEYS: Dict[str, str] = {
        "present": "present",
        "status": "state",
        "technology": "technology",
        "manufacturer": "vendor",
        "model_name": "model",
        "serial_number": "serial",
        "voltage_min_design": "voltage_design",
        "voltage_now": "voltage",
        "current_now": "present_rate",
        "charge_full_design": "design_capacity",
        "charge_full": "last_full_capacity",
        "charge_now": "remaining_capacity",
        "energy_full_design": "energy",
        "energy_full": "energy",
        "energy_now": "energy",
    }

    # /proc/acpi/battery/<id>/info and state keys
    PROCFS_KEYS: Dict[str, str] = {
        "present": "present",
        "design_capacity": "design_capacity",
        "last_full_capacity": "last_full_capacity",
        "battery_type": "technology",
        "oem_info": "vendor",
        "model_number": "model",
        "serial_number": "serial",
        "design_voltage": "voltage_design",
        "capacity_unit": "capacity_unit",
        "power_unit": "capacity_unit",
        "charging_state": "state",
        "present_rate": "present_rate",
        "remaining_capacity": "remaining_capacity",
        "present_voltage": "voltage",
    }


class Layout:
    """
    Where and how one kernel interface exposes batteries.

    Each battery is a directory under `root` holding an informational file
    and a state file, both parsed with `parser`.
    """

    def __init__(self, name: str, root: str, info_file: str, state_file: str,
                 parser: FieldParser, type_file: Optional[str] = None,
                 capacity_unit: Optional[str] = None) -> None:

        self.name: str = name
        self.root: str = root
        self.info_file: str = info_file
        self.state_file: str = state_file
        self.parser: FieldParser = parser
        # When set, only directories whose type file names a battery are batteries
        self.type_file: Optional[str] = type_file
        # Unit of unsuffixed capacity values
        self.capacity_unit: Optional[str] = capacity_unit

    def __repr__(self) -> str:
        return f"Layout({self.name!r}, root={self.root!r})"


SYSFS = Layout(
    name="sysfs",
    root=_Const.SYSFS_ROOT,
    info_file="uevent",
    state_file="uevent",
    parser=FieldParser(_Const.SYSFS_KEYS),
    type_file="type",
    capacity_unit="µAh",
)

PROCFS = Layout(
    name="procfs",
    root=_Const.PROCFS_ROOT,
    info_file="info",
    state_file="state",
    parser=FieldParser(_Const.PROCFS_KEYS),
)


if __name__ == "__main__":
    sys.exit()
