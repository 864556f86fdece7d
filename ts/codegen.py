#!/usr/bin/env python3
"""
Script to generate the TypeScript clients for the Trade contract.

Runs the generator from this directory, so ../schema and ./types/ resolve
next to it regardless of where the script is started from.
"""

import os
import sys

TS_DIR = os.path.dirname(os.path.abspath(__file__))

# Add the repository root to the path so cwcodegen imports without installing
sys.path.insert(0, os.path.dirname(TS_DIR))

from cwcodegen import run, trade_config

run(trade_config(), cwd=TS_DIR)
