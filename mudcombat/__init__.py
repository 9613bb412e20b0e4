"""
mudcombat: combat narration, combat prompt and death transition for a MUD server.

The combat engine decides outcomes; this package reacts to them.
"""

__version__ = "0.1.0"
