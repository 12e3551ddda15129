"""MirrorStamp - repository mirror status stamping."""

__version__ = "0.1.0"
