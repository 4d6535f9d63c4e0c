"""Forex news sentiment signal.

Fetches recent headlines for both currencies of a pair, weights them by
macro-economic theme, and turns the sentiment spread into a bullish,
bearish or neutral call with a short explanation.
"""

__all__ = []
