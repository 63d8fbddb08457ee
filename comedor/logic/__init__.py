"""Core business logic layer.

Modules / subpackages:
- days: weekday names in both spellings and week arithmetic
- menu: reconciliation of stored weekly menus into the canonical shape
- reporting: headcount aggregation over branch confirmations
"""
__all__ = ["days", "menu", "reporting"]
