"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@author : Aymen Brahim Djelloul
version : 1.0
date    : 18.10.2026
License : MIT

    // Tagged-field parser for battery pseudo-files.
    // Understands both 'key:   value unit' (procfs) and 'POWER_SUPPLY_KEY=value' (sysfs) lines.

"""

# IMPORTS
import re
import sys
from typing import Dict, Iterator, Optional, Tuple
from ._model import ChargingState

# Optional sign, digits, then an optional unit suffix such as 'mAh'
_NUMBER_PATTERN = re.compile(r"^([+-]?)(\d+)\s*([^\d\s]*)$")

# Unit suffixes which mean the battery reports energy instead of charge
_ENERGY_UNITS: Tuple[str, ...] = ("wh", "mwh", "uwh", "µwh", "w", "mw", "uw", "µw")


def normalize_key(raw_key: str) -> str:
    """
    Turn a raw key into its lookup token.

    'Design Capacity' -> 'design_capacity'
    'POWER_SUPPLY_CHARGE_FULL' -> 'charge_full'
    """
    key: str = re.sub(r"[\s\-]+", "_", raw_key.strip().lower())
    if key.startswith("power_supply_"):
        key = key[len("power_supply_"):]
    return key


def parse_lines(text: str) -> Iterator[Tuple[str, str]]:
    """ Yield (token, value) pairs, skipping lines without a separator or without a key"""
    for line in text.splitlines():

        # Split on whichever separator comes first
        positions = [pos for pos in (line.find("="), line.find(":")) if pos != -1]
        if not positions:
            continue

        sep: int = min(positions)
        key: str = normalize_key(line[:sep])
        if not key:
            continue

        yield key, line[sep + 1:].strip()


def is_energy_unit(unit: Optional[str]) -> bool:
    return bool(unit) and unit.strip().lower() in _ENERGY_UNITS


class FieldBuilder:
    """
    Collects typed field values while a battery file is parsed.

    Each known field has one setter. A value that doesn't fit its setter is
    dropped, which leaves the field unknown (None) instead of failing.
    """

    # Field name -> setter method name
    _SETTERS: Dict[str, str] = {
        "present": "set_flag",
        "state": "set_state",
        "design_capacity": "set_int",
        "last_full_capacity": "set_int",
        "remaining_capacity": "set_int",
        "present_rate": "set_rate",
        "voltage": "set_int",
        "voltage_design": "set_int",
        "technology": "set_text",
        "vendor": "set_text",
        "model": "set_text",
        "serial": "set_text",
        "capacity_unit": "set_unit",
        "energy": "set_energy",
    }

    FIELDS: Tuple[str, ...] = tuple(_SETTERS)

    def __init__(self) -> None:
        self.values: Dict[str, object] = {}
        self.units: Dict[str, str] = {}
        self.energy_unit: Optional[str] = None
        # Set by energy_* keys, which the kernel may expose next to charge_* keys
        self.energy_keys: bool = False

    def set(self, field: str, raw: str) -> None:
        setter_name: Optional[str] = self._SETTERS.get(field)
        if setter_name is None:
            return
        getattr(self, setter_name)(field, raw)

    def get(self, field: str, default=None):
        return self.values.get(field, default)

    def _set_number(self, field: str, raw: str, signed: bool) -> None:
        match = _NUMBER_PATTERN.match(raw.strip())
        if match is None:
            return

        sign, digits, unit = match.groups()
        if sign == "-" and not signed:
            return

        if unit:
            if is_energy_unit(unit):
                self.energy_unit = unit
            self.units[field] = unit

        self.values[field] = int(digits)

    def set_int(self, field: str, raw: str) -> None:
        self._set_number(field, raw, signed=False)

    def set_rate(self, field: str, raw: str) -> None:
        # Rates are magnitudes, some drivers sign them by direction
        self._set_number(field, raw, signed=True)

    def set_text(self, field: str, raw: str) -> None:
        if raw:
            self.values[field] = raw

    def set_flag(self, field: str, raw: str) -> None:
        value: str = raw.strip().lower()
        if value in ("yes", "1", "true"):
            self.values[field] = True
        elif value in ("no", "0", "false"):
            self.values[field] = False

    def set_state(self, field: str, raw: str) -> None:
        self.values[field] = ChargingState.from_text(raw)

    def set_unit(self, field: str, raw: str) -> None:
        if not raw:
            return
        if is_energy_unit(raw):
            self.energy_unit = raw
        self.values[field] = raw

    def set_energy(self, field: str, raw: str) -> None:
        self.energy_keys = True


class FieldParser:
    """
    Maps recognized key tokens to builder fields.

    The table is data, new firmware spellings can be added with `register`.
    Unrecognized keys are ignored.
    """

    def __init__(self, table: Dict[str, str]) -> None:
        self._table: Dict[str, str] = {}
        for token, field in table.items():
            self.register(token, field)

    def register(self, token: str, field: str) -> None:
        """ Recognize `token` (raw or normalized spelling) as `field`"""
        if field not in FieldBuilder.FIELDS:
            raise ValueError(f"Unknown battery field '{field}'")
        self._table[normalize_key(token)] = field

    def field_for(self, token: str) -> Optional[str]:
        return self._table.get(normalize_key(token))

    def parse(self, text: str) -> FieldBuilder:
        builder = FieldBuilder()
        for key, value in parse_lines(text):
            field = self._table.get(key)
            if field is not None:
                builder.set(field, value)
        return builder


if __name__ == "__main__":
    sys.exit()
