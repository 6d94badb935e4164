# keybridge_core/converters/dsa_converter.py
from __future__ import annotations
from keybridge_core.logger import get_logger
from keybridge_core.native import DSAParameters, NativeDSA
from keybridge_core.params import (
    AsymmetricCipherKeyPair,
    DsaKeyParameters,
    DsaParameters,
    DsaPrivateKeyParameters,
    DsaPublicKeyParameters,
    DsaValidationParameters,
)
from keybridge_core.utils import to_big_integer, to_fixed_bytes

log = get_logger("KB.Convert.DSA")


def export_to_library(native_key: NativeDSA, include_private: bool) -> AsymmetricCipherKeyPair:
    """
    Rebuild a native DSA key as library parameters.

    Validation parameters are attached only when the native key has a
    seed; public and private components share one DsaParameters.
    """
    dp = native_key.export_parameters(include_private)
    validation = None
    if dp.seed is not None:
        validation = DsaValidationParameters(dp.seed, dp.counter)

    parameters = DsaParameters(
        to_big_integer(dp.p),
        to_big_integer(dp.q),
        to_big_integer(dp.g),
        validation,
    )
    public = DsaPublicKeyParameters(parameters=parameters, y=to_big_integer(dp.y))
    if not include_private:
        log.debug("[DSA EXPORT] public only")
        return AsymmetricCipherKeyPair(public)

    private = DsaPrivateKeyParameters(parameters=parameters, x=to_big_integer(dp.x))
    log.debug(f"[DSA EXPORT] key pair | validation={validation is not None}")
    return AsymmetricCipherKeyPair(public, private)


def _domain_parameters(key: DsaKeyParameters) -> DSAParameters:
    domain = key.parameters
    params = DSAParameters(
        p=to_fixed_bytes(domain.p),
        q=to_fixed_bytes(domain.q),
        g=to_fixed_bytes(domain.g),
    )
    if domain.validation_parameters is not None:
        params.seed = domain.validation_parameters.seed
        params.counter = domain.validation_parameters.counter
    return params


def import_public(key: DsaPublicKeyParameters) -> NativeDSA:
    params = _domain_parameters(key)
    params.y = to_fixed_bytes(key.y)
    native = NativeDSA.import_parameters(params)
    log.debug(f"[DSA IMPORT] public | bits={native.key_size} | validation={params.seed is not None}")
    return native


def import_private(key: DsaPrivateKeyParameters) -> NativeDSA:
    params = _domain_parameters(key)
    params.x = to_fixed_bytes(key.x)
    native = NativeDSA.import_parameters(params)
    log.debug(f"[DSA IMPORT] private | bits={native.key_size} | validation={params.seed is not None}")
    return native
