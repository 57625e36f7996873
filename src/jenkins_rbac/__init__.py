"""Reconcile Jenkins role-strategy role assignments for a user."""

__version__ = "0.1.0"
