"""Core quantity logic.

Subpackages:
- units: unit domain tables (volume, weight, count)
- scaling: simplifying, formatting and scaling quantities, scaling warnings
- shopping: aggregating ingredients into category-grouped shopping lists

Everything here is pure: no I/O beyond the read-once scaling knowledge.
"""
__all__ = ["units", "scaling", "shopping"]
