"""Numeric helpers shared by the calculators"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (44.5 -> 45, -2.5 -> -2)"""
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
