"""Socomec devices."""

from .socomec_meter import SocomecMeter

__all__ = ["SocomecMeter"]
