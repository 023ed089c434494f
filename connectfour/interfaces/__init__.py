"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the console display and the command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
