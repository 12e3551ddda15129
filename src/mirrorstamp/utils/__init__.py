"""Utilities for MirrorStamp."""

from mirrorstamp.utils.duration import parse_duration
from mirrorstamp.utils.units import format_byte_unit

__all__ = ["format_byte_unit", "parse_duration"]
