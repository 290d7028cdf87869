"""Exceptions raised by lexitrie."""


class TrieError(Exception):
    """Base class for all lexitrie errors."""
    pass


class OutOfRangeError(TrieError, ValueError):
    """Raised when a character outside A-Z (after case folding) is used as a slot."""
    pass


class CorruptStateError(TrieError, RuntimeError):
    """
    Raised when the node store breaks its own invariants.
    
    This signals a bug in the engine, never bad input, and is not caught
    anywhere inside the package.
    """
    pass


class IndexFormatError(TrieError, ValueError):
    """Raised when a decompressed index does not match the node record layout."""
    pass
