"""
Provides rejoinder version information.
"""

# This file is auto-generated! Do not edit!
# Use `python -m incremental.update rejoinder` to change this file.

from incremental import Version


__version__ = Version("rejoinder", 21, 8, 0)
__all__ = ["__version__"]
