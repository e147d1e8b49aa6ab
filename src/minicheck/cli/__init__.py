"""
minicheck Command-Line Interface
================================

- **mlcheck**: check a mini language program and report diagnostics

The tool is a Click-based CLI application with unified exit codes
(see errors.py).
"""

__all__ = ["mlcheck"]
