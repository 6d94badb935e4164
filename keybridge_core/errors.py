# keybridge_core/errors.py
from __future__ import annotations


class KeyConversionError(Exception):
    pass


class MissingKeyError(KeyConversionError, ValueError):
    """No key object was passed."""


class UnsupportedKeyError(KeyConversionError, TypeError):
    """Algorithm family or concrete key type cannot be converted."""


class InvalidKeyArgumentError(KeyConversionError, ValueError):
    """Key object is of a supported kind but lacks what the call needs."""
