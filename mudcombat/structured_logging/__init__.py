"""
Structured logging package for mudcombat.

All imports should use explicit paths like
'from mudcombat.structured_logging.enhanced_logging_config import get_logger'.

The package is not named 'logging' to avoid namespace conflicts with the
standard library logging module.
"""

__all__: list[str] = []
