"""
This code or file is part of 'AcpiPy' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

"""

# IMPORTS
import sys
from acpipy.cli import main

if __name__ == "__main__":
    sys.exit(main())
