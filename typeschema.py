#!/usr/bin/env python3
"""
Type-driven JSON Schema tool

This script prints the JSON schema of a Python type, validates JSON data
files and parses JSON schema documents.

Usage:
    python typeschema.py schema <module:Type> [--validator] [--output FILE]
    python typeschema.py validate <data_file> (--type <module:Type> | --schema <schema_file>)
    python typeschema.py parse <schema_file>
"""

import sys

from json_typeschema.cli import main

if __name__ == "__main__":
    sys.exit(main())
