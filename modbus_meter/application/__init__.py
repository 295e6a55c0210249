"""Application layer for the Modbus meter library.

Coordinates domain objects and infrastructure ports into poll cycles.
"""
