"""
Core calendar arithmetic: integer primitives, value types, and the leap
calendar engine.

This module is pure computation: no clocks, no timezones, no I/O beyond
loading the JSON Schema contracts.
"""
