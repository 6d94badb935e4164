# keybridge_core/dispatch.py
"""
Public entry points.

Each call classifies its input once into a KeyKind and routes on it to
one converter function per variant; converters do no type routing.
"""

from __future__ import annotations
from enum import Enum
from typing import Union
from keybridge_core.converters import dsa_converter, rsa_converter
from keybridge_core.errors import MissingKeyError, UnsupportedKeyError
from keybridge_core.logger import get_logger
from keybridge_core.native import NativeDSA, NativeKey, NativeRSA, wrap_native_key
from keybridge_core.params import (
    AsymmetricCipherKeyPair,
    AsymmetricKeyParameter,
    DsaPrivateKeyParameters,
    DsaPublicKeyParameters,
    RsaKeyParameters,
    RsaPrivateCrtKeyParameters,
)

log = get_logger("KB.Dispatch")


class KeyKind(Enum):
    RSA_PUBLIC = "rsa-public"
    RSA_PRIVATE = "rsa-private"
    DSA_PUBLIC = "dsa-public"
    DSA_PRIVATE = "dsa-private"
    UNSUPPORTED = "unsupported"


def classify_native_key(native_key: NativeKey) -> KeyKind:
    if isinstance(native_key, NativeRSA):
        return KeyKind.RSA_PRIVATE if native_key.has_private_key else KeyKind.RSA_PUBLIC
    if isinstance(native_key, NativeDSA):
        return KeyKind.DSA_PRIVATE if native_key.has_private_key else KeyKind.DSA_PUBLIC
    return KeyKind.UNSUPPORTED


def classify_library_key(key: AsymmetricKeyParameter) -> KeyKind:
    # Private/public is decided by the flag first; a type that claims the
    # wrong side falls through to UNSUPPORTED.
    if getattr(key, "is_private", False):
        if isinstance(key, DsaPrivateKeyParameters):
            return KeyKind.DSA_PRIVATE
        if isinstance(key, RsaPrivateCrtKeyParameters):
            return KeyKind.RSA_PRIVATE
    else:
        if isinstance(key, DsaPublicKeyParameters):
            return KeyKind.DSA_PUBLIC
        if isinstance(key, RsaKeyParameters):
            return KeyKind.RSA_PUBLIC
    return KeyKind.UNSUPPORTED


def _native(native_key, name: str) -> NativeKey:
    if native_key is None:
        raise MissingKeyError(f"{name} must not be None")
    try:
        return wrap_native_key(native_key)
    except UnsupportedKeyError:
        log.warning(f"[DISPATCH] rejected native key | type={type(native_key).__name__}")
        raise


def _export(native: NativeKey, include_private: bool) -> AsymmetricCipherKeyPair:
    kind = classify_native_key(native)
    log.debug(f"[DISPATCH] export | kind={kind.value} | private={include_private}")

    if kind in (KeyKind.RSA_PUBLIC, KeyKind.RSA_PRIVATE):
        return rsa_converter.export_to_library(native, include_private)
    if kind in (KeyKind.DSA_PUBLIC, KeyKind.DSA_PRIVATE):
        return dsa_converter.export_to_library(native, include_private)

    log.warning(f"[DISPATCH] rejected native key | type={type(native).__name__}")
    raise UnsupportedKeyError(f"'{type(native).__name__}' is currently not supported.")


def to_library_key_pair(native_key) -> AsymmetricCipherKeyPair:
    """
    Convert a native private key (NativeKey or cryptography RSA/DSA key)
    into a library key pair with both components populated.

    Raises MissingKeyError for None, UnsupportedKeyError for any other
    algorithm family and InvalidKeyArgumentError for public-only keys.
    """
    return _export(_native(native_key, "native_key"), include_private=True)


def to_library_public_key(native_key) -> Union[RsaKeyParameters, DsaPublicKeyParameters]:
    """Public component only; works for public and private native keys."""
    return _export(_native(native_key, "native_key"), include_private=False).public


def to_native_key(library_key: AsymmetricKeyParameter) -> NativeKey:
    """
    Convert library key parameters into a native key object; the public
    or private variant is chosen from the parameters' is_private flag.
    """
    if library_key is None:
        raise MissingKeyError("library_key must not be None")

    kind = classify_library_key(library_key)
    log.debug(f"[DISPATCH] import | kind={kind.value} | type={type(library_key).__name__}")

    if kind is KeyKind.RSA_PRIVATE:
        return rsa_converter.import_private(library_key)
    if kind is KeyKind.RSA_PUBLIC:
        return rsa_converter.import_public(library_key)
    if kind is KeyKind.DSA_PRIVATE:
        return dsa_converter.import_private(library_key)
    if kind is KeyKind.DSA_PUBLIC:
        return dsa_converter.import_public(library_key)

    log.warning(f"[DISPATCH] rejected library key | type={type(library_key).__name__}")
    raise UnsupportedKeyError(f"Cannot convert {type(library_key).__name__} into a native key.")
