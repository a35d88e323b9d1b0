#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
netdmenu main module entry point.
Enables running netdmenu as a module: python -m netdmenu
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
