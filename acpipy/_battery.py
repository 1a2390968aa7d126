"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@_AUTHOR : Aymen Brahim Djelloul
VERSION : 1.0
date    : 18.10.2026
License : MIT License

"""

# IMPORTS
import os
import sys
from datetime import timedelta
from typing import List, Optional
from ._core import Layout, SYSFS, _Const
from ._parser import FieldBuilder
from ._exceptions import Unsupported, BatteryIOError, ParseError, UnsupportedUnit
from ._model import (BatteryId, BatteryReport, BatteryStaticInfo, BatteryDynamicState,
                     ChargingState)


# Declare software constants
VERSION: str = "1.0"
_AUTHOR: str = "Aymen Brahim Djelloul"
_CAPTION: str = f"AcpiPy - v{VERSION}"


def _read_file(file_path: str) -> str:
    """
    Reads the contents of the specified file and returns it as a string.

    Args:
        file_path: Path to the file to read

    Raises:
        BatteryIOError: If the file can't be opened or read
    """
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise BatteryIOError(file_path, e.strerror or str(e)) from e


def list_batteries(root: Optional[str] = None, layout: Layout = SYSFS) -> List[BatteryId]:
    """
    Discover the batteries exposed by the kernel.

    Args:
        root: Battery root directory, defaults to the layout's well-known root
        layout: Kernel interface to read (SYSFS or PROCFS)

    Returns:
        Battery ids in directory listing order, empty when none is present

    Raises:
        Unsupported: If the root directory does not exist
        BatteryIOError: If the root directory can't be listed
    """
    root = root or layout.root

    if not os.path.exists(root):
        raise Unsupported(root)

    try:
        entries: List[str] = os.listdir(root)
    except OSError as e:
        raise BatteryIOError(root, e.strerror or str(e)) from e

    batteries: List[BatteryId] = []

    for entry in entries:
        entry_path = os.path.join(root, entry)
        if not os.path.isdir(entry_path):
            continue

        if layout.type_file:
            type_path = os.path.join(entry_path, layout.type_file)
            # AC adapters and USB supplies share the directory
            if not os.path.isfile(type_path):
                continue
            try:
                supply_type = _read_file(type_path)
            except BatteryIOError:
                # Unreadable or unplugged while listing
                continue
            if supply_type.strip().lower() != _Const.BATTERY_TYPE:
                continue

        batteries.append(entry)

    return batteries


def read_battery(battery_id: BatteryId, root: Optional[str] = None, layout: Layout = SYSFS) -> BatteryReport:
    """
    Read one battery and derive its percentage, time remaining and health.

    Args:
        battery_id: Id returned by list_batteries in the same cycle
        root: Battery root directory, defaults to the layout's well-known root
        layout: Kernel interface to read (SYSFS or PROCFS)

    Returns:
        BatteryReport, with present=False and nothing else known when the
        device says the battery is not inserted

    Raises:
        BatteryIOError: If a device file can't be read
        UnsupportedUnit: If the battery reports energy (mWh) instead of charge
        ParseError: If the design or last full capacity is missing
    """
    device_path = os.path.join(root or layout.root, battery_id)

    info: FieldBuilder = layout.parser.parse(_read_file(os.path.join(device_path, layout.info_file)))
    state: FieldBuilder = layout.parser.parse(_read_file(os.path.join(device_path, layout.state_file)))

    if info.get("present") is False or state.get("present") is False:
        return BatteryReport.absent(battery_id)

    energy_unit: Optional[str] = info.energy_unit or state.energy_unit
    if energy_unit:
        raise UnsupportedUnit(energy_unit, battery_id)

    # Energy keys alongside a full set of charge keys still make a charge battery
    if info.energy_keys or state.energy_keys:
        charge_fields = (info.get("design_capacity"), info.get("last_full_capacity"),
                         state.get("remaining_capacity"))
        if any(value is None for value in charge_fields):
            raise UnsupportedUnit("µWh", battery_id)

    static: BatteryStaticInfo = _build_static_info(battery_id, info, layout)
    dynamic = BatteryDynamicState(
        present=True,
        state=state.get("state", ChargingState.UNKNOWN),
        remaining_capacity=state.get("remaining_capacity"),
        present_rate=state.get("present_rate"),
        voltage=state.get("voltage"),
    )

    return BatteryReport(
        id=battery_id,
        present=True,
        static=static,
        dynamic=dynamic,
        percentage=charge_percentage(dynamic.remaining_capacity, static.last_full_capacity),
        time_remaining=time_to_state_change(dynamic.remaining_capacity, static.last_full_capacity,
                                            dynamic.present_rate, dynamic.state),
        health=battery_health(static.last_full_capacity, static.design_capacity),
    )


def read_all(root: Optional[str] = None, layout: Layout = SYSFS) -> List[BatteryReport]:
    """ Enumerate the batteries and read each one of them"""
    return [read_battery(battery_id, root, layout) for battery_id in list_batteries(root, layout)]


def _build_static_info(battery_id: BatteryId, info: FieldBuilder, layout: Layout) -> BatteryStaticInfo:

    for required in ("design_capacity", "last_full_capacity"):
        if info.get(required) is None:
            raise ParseError(required, battery_id)

    return BatteryStaticInfo(
        design_capacity=info.get("design_capacity"),
        last_full_capacity=info.get("last_full_capacity"),
        technology=info.get("technology"),
        vendor=info.get("vendor"),
        model=info.get("model"),
        serial=info.get("serial"),
        voltage_design=info.get("voltage_design"),
        capacity_unit=(info.get("capacity_unit") or info.units.get("design_capacity")
                       or layout.capacity_unit),
    )


def charge_percentage(remaining: Optional[int], last_full: Optional[int]) -> Optional[float]:
    """ Remaining charge as a percentage of the last full charge, clamped to 0-100"""
    if remaining is None or not last_full:
        return None
    return max(0.0, min(100.0, remaining * 100.0 / last_full))


def time_to_state_change(remaining: Optional[int], last_full: Optional[int],
                         rate: Optional[int], state: ChargingState) -> Optional[timedelta]:
    """
    Estimate the time until the battery is full (charging) or empty (discharging).

    Returns None for any other state, for a zero or unknown rate and for
    unknown capacities, never a made-up zero.
    """
    if not rate or remaining is None:
        return None

    if state is ChargingState.CHARGING:
        if last_full is None:
            return None
        distance = last_full - remaining
    elif state is ChargingState.DISCHARGING:
        distance = remaining
    else:
        return None

    return timedelta(seconds=int(abs(distance) * 3600 / rate))


def battery_health(last_full: Optional[int], design: Optional[int]) -> Optional[float]:
    """ Last full capacity as a percentage of the design capacity"""
    if last_full is None or not design:
        return None
    return round((last_full / design) * 100, 2)


if __name__ == "__main__":
    sys.exit(0)
