"""
@_AUTHOR : Aymen Brahim Djelloul
date : 18.10.2026
License : MIT License

    // Synthetic sysfs and procfs battery trees for the test suites

"""

# IMPORTS
import os
from typing import Optional

SYSFS_UEVENT: str = """\
POWER_SUPPLY_NAME=BAT0
POWER_SUPPLY_TYPE=Battery
POWER_SUPPLY_STATUS=Discharging
POWER_SUPPLY_PRESENT=1
POWER_SUPPLY_TECHNOLOGY=Li-ion
POWER_SUPPLY_CYCLE_COUNT=0
POWER_SUPPLY_VOLTAGE_MIN_DESIGN=11400000
POWER_SUPPLY_VOLTAGE_NOW=12100000
POWER_SUPPLY_CURRENT_NOW=1100
POWER_SUPPLY_CHARGE_FULL_DESIGN=2400
POWER_SUPPLY_CHARGE_FULL=2200
POWER_SUPPLY_CHARGE_NOW=1100
POWER_SUPPLY_CAPACITY=50
POWER_SUPPLY_MODEL_NAME=5B10W13930
POWER_SUPPLY_MANUFACTURER=SMP
POWER_SUPPLY_SERIAL_NUMBER= 1234
"""

SYSFS_ENERGY_UEVENT: str = """\
POWER_SUPPLY_NAME=BAT1
POWER_SUPPLY_STATUS=Discharging
POWER_SUPPLY_PRESENT=1
POWER_SUPPLY_POWER_NOW=9000000
POWER_SUPPLY_ENERGY_FULL_DESIGN=57000000
POWER_SUPPLY_ENERGY_FULL=52000000
POWER_SUPPLY_ENERGY_NOW=26000000
"""

PROCFS_INFO: str = """\
present:                 yes
design capacity:         4400 mAh
last full capacity:      4000 mAh
battery technology:      rechargeable
design voltage:          10800 mV
design capacity warning: 400 mAh
design capacity low:     132 mAh
capacity granularity 1:  44 mAh
capacity granularity 2:  44 mAh
model number:            42T4511
serial number:           12345
battery type:            LION
OEM info:                SANYO
"""

PROCFS_STATE: str = """\
present:                 yes
capacity state:          ok
charging state:          charging
present rate:            2000 mA
remaining capacity:      3000 mAh
present voltage:         12000 mV
"""


def write_file(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def make_sysfs_supply(root: str, name: str, uevent: Optional[str] = None,
                      supply_type: Optional[str] = "Battery") -> str:
    """ Create /sys/class/power_supply/<name> with a type file and an uevent file"""
    path = os.path.join(root, name)
    os.makedirs(path)
    if supply_type is not None:
        write_file(os.path.join(path, "type"), supply_type + "\n")
    if uevent is not None:
        write_file(os.path.join(path, "uevent"), uevent)
    return path


def make_procfs_battery(root: str, name: str, info: str = PROCFS_INFO, state: str = PROCFS_STATE) -> str:
    """ Create /proc/acpi/battery/<name> with info and state files"""
    path = os.path.join(root, name)
    os.makedirs(path)
    write_file(os.path.join(path, "info"), info)
    write_file(os.path.join(path, "state"), state)
    return path


def uevent_with(base: str = SYSFS_UEVENT, **overrides: Optional[str]) -> str:
    """
    Return `base` with POWER_SUPPLY_<KEY> lines replaced, or dropped when the
    override is None. Keys not in `base` are appended.
    """
    lines = []
    seen = set()
    for line in base.splitlines():
        key = line.split("=", 1)[0][len("POWER_SUPPLY_"):].lower()
        if key in overrides:
            seen.add(key)
            if overrides[key] is None:
                continue
            line = f"POWER_SUPPLY_{key.upper()}={overrides[key]}"
        lines.append(line)

    for key, value in overrides.items():
        if key not in seen and value is not None:
            lines.append(f"POWER_SUPPLY_{key.upper()}={value}")

    return "\n".join(lines) + "\n"
