"""
Data Types Demo Package

A small teaching library that shows how primitive data types behave and
how values move between them.

ARCHITECTURAL GUARANTEE:
------------------------
Python has one unbounded int and one double-precision float.
Everything this package says about fixed widths is modelled explicitly:
    - Integer ranges (8/16/32/64 bits, signed and unsigned)
    - Single precision rounding
    - Two's-complement truncation

The library is pure. Only `dtdemo.program` writes to stdout.
"""

__version__ = "0.1.0"
