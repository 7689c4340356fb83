"""
CHUK Intervals - interval algebra for spelled music theory.

Intervals are quality + number values (M3, d5, A11) with exact arithmetic
on the circle of fifths, plus spelled notes that transpose by them.
"""

__version__ = "0.1.0"
