"""Byte transform API module."""

from .xor_transform import xor_transform

__all__ = ["xor_transform"]
