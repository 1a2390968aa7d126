"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.


@author : Aymen Brahim Djelloul
version : 1.0
date    : 18.10.2026
License : MIT

"""

# IMPORTS
import sys
from typing import Optional


class AcpiPyException(Exception):
    """ Base class of every error raised by AcpiPy"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return f"ERROR : {self.message}"


class Unsupported(AcpiPyException):
    """ The host exposes no battery subsystem at all, retrying will not help"""

    def __init__(self, root: str) -> None:
        self.root: str = root
        super().__init__(f"No battery subsystem found, '{root}' does not exist.")


class BatteryIOError(AcpiPyException):
    """ Reading a battery pseudo-file failed, may succeed on a later poll"""

    def __init__(self, path: str, reason: str) -> None:
        self.path: str = path
        self.reason: str = reason
        super().__init__(f"Can't read '{path}' : {reason}")


class ParseError(AcpiPyException):
    """ A required battery field is missing from the device files"""

    def __init__(self, field: str, battery_id: Optional[str] = None) -> None:
        self.field: str = field
        self.battery_id: Optional[str] = battery_id
        where = f" for battery '{battery_id}'" if battery_id else ""
        super().__init__(f"Required field '{field}' is missing{where}.")


class UnsupportedUnit(AcpiPyException):
    """ The battery reports in an energy unit (mWh) which AcpiPy does not handle"""

    def __init__(self, unit: str, battery_id: Optional[str] = None) -> None:
        self.unit: str = unit
        self.battery_id: Optional[str] = battery_id
        where = f"Battery '{battery_id}'" if battery_id else "Battery"
        super().__init__(f"{where} reports in '{unit}', only charge units (mAh) are supported.")


if __name__ == "__main__":
    sys.exit()
