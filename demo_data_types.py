#!/usr/bin/env python3
"""
Demo: Print every primitive data type sample and conversion.
"""

from dtdemo.program import main


if __name__ == "__main__":
    main()
