"""
Exceptions raised by the heat flow simulator.

All errors are detected at construction or registration time, except
NumericInstability, which a rod only raises when built with check_finite=True.
"""


class HeatFlowError(Exception):
    """Base class for all simulator errors."""


class InvalidConfiguration(HeatFlowError, ValueError):
    """Rod or simulation parameters cannot produce a valid simulation."""


class OutOfRange(HeatFlowError, IndexError):
    """A source/sink position lies outside the rod."""


class NumericInstability(HeatFlowError, ArithmeticError):
    """A time-step produced NaN or infinite temperatures."""
