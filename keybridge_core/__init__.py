"""
keybridge core package
======================
Converts RSA and DSA key material between the native representation
(fixed-width unsigned byte fields on `cryptography` keys) and the library
representation (arbitrary-precision integer key parameters).

Provides:
- Integer codec for single numeric fields
- RSA and DSA converters
- Dispatcher entry points: to_library_key_pair(), to_library_public_key(),
  to_native_key()
"""

from keybridge_core.dispatch import (
    KeyKind,
    classify_library_key,
    classify_native_key,
    to_library_key_pair,
    to_library_public_key,
    to_native_key,
)
from keybridge_core.errors import (
    InvalidKeyArgumentError,
    KeyConversionError,
    MissingKeyError,
    UnsupportedKeyError,
)

__all__ = [
    "KeyKind",
    "classify_library_key",
    "classify_native_key",
    "to_library_key_pair",
    "to_library_public_key",
    "to_native_key",
    "InvalidKeyArgumentError",
    "KeyConversionError",
    "MissingKeyError",
    "UnsupportedKeyError",
]
