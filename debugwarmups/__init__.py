"""Debugger warm-up exercises, a fire simulation, statistical checks and console utilities."""

__version__ = "0.1.0"