#!/usr/bin/env python3
# filename: run.py
# -*- coding: utf-8 -*-
"""
Entry point for bootstrapping an AutoGPT checkout and starting it.
"""

import sys

from bootstrap.cli import main

if __name__ == "__main__":
    sys.exit(main())
