"""
Version information for json_enum.
"""

__version__ = "0.1.0"
