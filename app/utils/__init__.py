"""
Utilities Package

Helper functions used across the application:
- ids.py: Opaque identifier generation and timestamps
"""

from app.utils.ids import generate_id, is_valid_id, utc_now

__all__ = ["generate_id", "is_valid_id", "utc_now"]
