"""Test doubles for Modbus meter tests."""

from .fake_register_reader import FakeRegisterReader

__all__ = ["FakeRegisterReader"]
