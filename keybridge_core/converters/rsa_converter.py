# keybridge_core/converters/rsa_converter.py
from __future__ import annotations
from keybridge_core.errors import InvalidKeyArgumentError
from keybridge_core.logger import get_logger
from keybridge_core.native import NativeRSA, RSAParameters
from keybridge_core.params import (
    AsymmetricCipherKeyPair,
    RsaKeyParameters,
    RsaPrivateCrtKeyParameters,
)
from keybridge_core.utils import to_big_integer, to_fixed_bytes

log = get_logger("KB.Convert.RSA")


def export_to_library(native_key: NativeRSA, include_private: bool) -> AsymmetricCipherKeyPair:
    """
    Read the native RSA fields and rebuild them as library parameters.

    The private component repeats modulus and public exponent, since the
    library's CRT key carries them alongside the five CRT values.
    """
    rp = native_key.export_parameters(include_private)
    modulus = to_big_integer(rp.modulus)
    exponent = to_big_integer(rp.exponent)
    public = RsaKeyParameters(False, modulus, exponent)
    if not include_private:
        log.debug("[RSA EXPORT] public only")
        return AsymmetricCipherKeyPair(public)

    private = RsaPrivateCrtKeyParameters(
        modulus=modulus,
        public_exponent=exponent,
        private_exponent=to_big_integer(rp.d),
        p=to_big_integer(rp.p),
        q=to_big_integer(rp.q),
        dp=to_big_integer(rp.dp),
        dq=to_big_integer(rp.dq),
        qinv=to_big_integer(rp.inverse_q),
    )
    log.debug(f"[RSA EXPORT] key pair | bits={modulus.bit_length()}")
    return AsymmetricCipherKeyPair(public, private)


def _public_parameters(modulus: int, exponent: int) -> RSAParameters:
    return RSAParameters(
        modulus=to_fixed_bytes(modulus),
        exponent=to_fixed_bytes(exponent),
    )


def import_public(key: RsaKeyParameters) -> NativeRSA:
    if key.is_private:
        raise InvalidKeyArgumentError("import_public needs public RSA parameters.")
    native = NativeRSA.import_parameters(_public_parameters(key.modulus, key.exponent))
    log.debug(f"[RSA IMPORT] public | bits={native.key_size}")
    return native


def import_private(key: RsaPrivateCrtKeyParameters) -> NativeRSA:
    # A CRT key's `exponent` is d; the public half lives in public_exponent.
    params = _public_parameters(key.modulus, key.public_exponent)
    params.d = to_fixed_bytes(key.private_exponent)
    params.p = to_fixed_bytes(key.p)
    params.q = to_fixed_bytes(key.q)
    params.dp = to_fixed_bytes(key.dp)
    params.dq = to_fixed_bytes(key.dq)
    params.inverse_q = to_fixed_bytes(key.qinv)
    native = NativeRSA.import_parameters(params)
    log.debug(f"[RSA IMPORT] private | bits={native.key_size}")
    return native
