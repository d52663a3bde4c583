"""
hackasm Command-Line Interface
==============================

This package provides the ``hackasm`` command-line tool, implemented as a
Click-based CLI application with consistent error reporting and exit codes.
"""

__all__ = ["hackasm"]
