"""Dynamic Alarm System.

Picks a randomized wake-up target between a soft and a hard limit and
generates a synthetic sleep-stage series leading up to it.
"""
