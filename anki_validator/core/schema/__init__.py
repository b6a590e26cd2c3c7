"""
Schema reconciliation against the live note types.
"""

from .reconciler import SchemaReconciler

__all__ = [
    "SchemaReconciler",
]
