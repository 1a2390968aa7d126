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
from ._battery import (list_batteries, read_battery, read_all, charge_percentage, time_to_state_change,
                       battery_health, _AUTHOR, VERSION, _CAPTION)
from ._model import BatteryId, BatteryReport, BatteryStaticInfo, BatteryDynamicState, ChargingState
from ._core import Layout, SYSFS, PROCFS
from ._parser import FieldParser, FieldBuilder
from ._exceptions import AcpiPyException, Unsupported, BatteryIOError, ParseError, UnsupportedUnit

__all__ = ['list_batteries', 'read_battery', 'read_all', 'charge_percentage', 'time_to_state_change',
           'battery_health', 'BatteryId', 'BatteryReport', 'BatteryStaticInfo', 'BatteryDynamicState',
           'ChargingState', 'Layout', 'SYSFS', 'PROCFS', 'FieldParser', 'FieldBuilder', 'AcpiPyException',
           'Unsupported', 'BatteryIOError', 'ParseError', 'UnsupportedUnit', '_AUTHOR', 'VERSION', '_CAPTION']
