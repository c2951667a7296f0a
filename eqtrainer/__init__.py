"""
EqTrainer: equity and outs engine for a poker trainer

Estimates a hero's equity, hand-category distribution and outs for
Hold'em and Omaha spots against uniformly random opponents.
"""

__version__ = "0.1.0"
