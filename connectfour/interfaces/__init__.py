"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the text interface used to play a session in a
terminal, along with the parsers for the raw lines it reads.
"""

# Don't import anything here to avoid circular imports
__all__ = []
