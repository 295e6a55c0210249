"""Domain layer for the Modbus meter library.

This layer contains:
- Interfaces: capability contracts and ports
- Value Objects: immutable domain primitives
- Entities: channels, register ranges and protocols
- Elements: decode rules for spans of registers

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
"""
