"""
Speedboat API: a small CRUD JSON API for speedboat records
"""

__version__ = "0.1.0"
