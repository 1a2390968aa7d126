#!/usr/bin/env python3

"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

    // AcpiPy - battery status in the manner of the classic 'acpi' command
    // This code uses AcpiPy to collect battery reports and prints them one line per battery,
    // with optional capacity details, JSON output and colors.

"""

# IMPORTS
import sys
import json
import argparse
import traceback
from datetime import timedelta
from typing import List, Optional
from colorama import Fore, Style, just_fix_windows_console
import acpipy
from acpipy import (AcpiPyException, BatteryReport, ChargingState, Unsupported, SYSFS, PROCFS)

# Exit codes
EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_UNSUPPORTED: int = 2
# 128 + SIGINT
EXIT_INTERRUPTED: int = 130


class Colors:
    """
    A utility class that defines CLI coloring using 'colorama'
    """

    YELLOW = Fore.YELLOW
    GREEN = Fore.GREEN
    RED = Fore.RED
    CYAN = Fore.CYAN
    BOLD = Style.BRIGHT
    END = Style.RESET_ALL


class NoColors:
    """ Same attributes as Colors, all empty, used with --no-color"""

    YELLOW = GREEN = RED = CYAN = BOLD = END = ""


class AcpiCLI:
    """Command line tool printing battery status lines"""

    def __init__(self, argv: Optional[List[str]] = None) -> None:

        # Get arguments
        self.args = self._parse_arguments(argv)

        self.colors = NoColors if self.args.no_color else Colors
        self.layout = PROCFS if self.args.proc else SYSFS

    @staticmethod
    def _parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command line arguments"""
        parser = argparse.ArgumentParser(
            prog="acpipy",
            description=f"{acpipy._CAPTION} - Battery status from ACPI",
        )

        parser.add_argument(
            "-i", "--details",
            action="store_true",
            help="Show design and last full capacity"
        )

        parser.add_argument(
            "-j", "--json",
            action="store_true",
            help="Print the battery reports as JSON"
        )

        parser.add_argument(
            "-p", "--proc",
            action="store_true",
            help="Read the legacy /proc/acpi interface instead of sysfs"
        )

        parser.add_argument(
            "--root",
            type=str,
            default=None,
            help="Battery root directory (defaults to the interface's usual path)"
        )

        parser.add_argument(
            "--no-color",
            action="store_true",
            help="Disable colored output"
        )

        parser.add_argument(
            "-d", "--dev",
            action="store_true",
            help="Print developer diagnostics"
        )

        parser.add_argument(
            "-v", "--version",
            action="store_true",
            help="Show application version"
        )

        return parser.parse_args(argv)

    def _dev(self, message: str) -> None:
        if self.args.dev:
            print(f"[DEV] {message}")

    def run(self) -> int:
        """Run the CLI tool and return the process exit code"""
        if self.args.version:
            print(f"{acpipy._CAPTION} - Developed by {acpipy._AUTHOR}")
            return EXIT_OK

        self._dev(f"layout={self.layout!r} root={self.args.root or self.layout.root}")

        try:
            battery_ids = acpipy.list_batteries(self.args.root, self.layout)

        except Unsupported as e:
            self._dev_traceback()
            print(f"{self.colors.YELLOW}No support for device type: battery ({e.root}){self.colors.END}",
                  file=sys.stderr)
            return EXIT_UNSUPPORTED

        except AcpiPyException as e:
            self._dev_traceback()
            print(f"{self.colors.RED}{e}{self.colors.END}", file=sys.stderr)
            return EXIT_ERROR

        self._dev(f"batteries found: {battery_ids}")

        if not battery_ids:
            print("No battery information available")
            return EXIT_OK

        reports: List[BatteryReport] = []
        exit_code: int = EXIT_OK

        for index, battery_id in enumerate(battery_ids):
            try:
                report = acpipy.read_battery(battery_id, self.args.root, self.layout)

            except AcpiPyException as e:
                self._dev_traceback()
                print(f"{self.colors.RED}Battery {index}: {e}{self.colors.END}", file=sys.stderr)
                exit_code = EXIT_ERROR
                continue

            self._dev(f"{battery_id}: {report.as_dict()}")
            reports.append(report)

            if not self.args.json:
                print(self._format_status_line(index, report))
                if self.args.details and report.present:
                    print(self._format_details_line(index, report))

        if self.args.json:
            print(json.dumps([report.as_dict() for report in reports], indent=2))

        return exit_code

    def _dev_traceback(self) -> None:
        if self.args.dev:
            traceback.print_exc()

    def _format_status_line(self, index: int, report: BatteryReport) -> str:
        """ 'Battery 0: Discharging, 50%, 01:23:45 remaining'"""
        if not report.present:
            return f"Battery {index}: Not present"

        parts: List[str] = [
            report.state.value,
            self._format_percentage(report.percentage),
        ]

        if report.time_remaining is not None:
            suffix = "until charged" if report.state is ChargingState.CHARGING else "remaining"
            parts.append(f"{self._format_duration(report.time_remaining)} {suffix}")

        return f"{self.colors.BOLD}Battery {index}:{self.colors.END} " + ", ".join(parts)

    def _format_details_line(self, index: int, report: BatteryReport) -> str:
        """ 'Battery 0: design capacity 4400 mAh, last full capacity 4000 mAh = 90%'"""
        unit = f" {report.capacity_unit}" if report.capacity_unit else ""
        health = "n/a" if report.health is None else f"{report.health:.0f}%"

        return (f"Battery {index}: design capacity {report.design_capacity}{unit}, "
                f"last full capacity {report.last_full_capacity}{unit} = {health}")

    def _format_percentage(self, percentage: Optional[float]) -> str:
        """Format battery percentage, colored by level"""
        if percentage is None:
            return "n/a"

        if percentage >= 80:
            color = self.colors.GREEN
        elif percentage >= 30:
            color = self.colors.YELLOW
        else:
            color = self.colors.RED

        return f"{color}{percentage:.0f}%{self.colors.END}"

    @staticmethod
    def _format_duration(duration: timedelta) -> str:
        """ HH:MM:SS, hours may exceed 24"""
        total = int(duration.total_seconds())
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the CLI tool"""

    just_fix_windows_console()

    try:
        return AcpiCLI(argv).run()

    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Battery information gathering interrupted.{Colors.END}")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
