"""Quaternion arithmetic with exact equality and real scalar interoperability."""

from hypercomplex.quaternion import Quaternion

__all__ = ["Quaternion"]
