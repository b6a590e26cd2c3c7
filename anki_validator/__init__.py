"""
anki-validator: checks Anki notes against declarative per-field rules.
"""

__version__ = "0.1.0"
