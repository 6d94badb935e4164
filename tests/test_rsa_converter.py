import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from keybridge_core.converters import rsa_converter
from keybridge_core.errors import InvalidKeyArgumentError
from keybridge_core.native import NativeRSA
from keybridge_core.params import RsaKeyParameters, RsaPrivateCrtKeyParameters
from keybridge_core.utils import to_signed_bytes


def test_export_carries_all_crt_values(rsa_private_key):
    numbers = rsa_private_key.private_numbers()
    pair = rsa_converter.export_to_library(NativeRSA(rsa_private_key), include_private=True)

    assert pair.public == RsaKeyParameters(False, numbers.public_numbers.n, numbers.public_numbers.e)
    priv = pair.private
    assert isinstance(priv, RsaPrivateCrtKeyParameters)
    assert priv.is_private
    assert priv.modulus == numbers.public_numbers.n
    assert priv.public_exponent == numbers.public_numbers.e
    assert priv.private_exponent == numbers.d
    assert (priv.p, priv.q) == (numbers.p, numbers.q)
    assert (priv.dp, priv.dq, priv.qinv) == (numbers.dmp1, numbers.dmq1, numbers.iqmp)


def test_private_roundtrip_is_bit_exact(rsa_private_key):
    native = NativeRSA(rsa_private_key)
    pair = rsa_converter.export_to_library(native, include_private=True)
    restored = rsa_converter.import_private(pair.private)

    assert restored.has_private_key
    assert restored.export_parameters(True) == native.export_parameters(True)


def test_imported_private_key_uses_private_exponent(rsa_private_key):
    pair = rsa_converter.export_to_library(NativeRSA(rsa_private_key), include_private=True)
    restored = rsa_converter.import_private(pair.private)

    message = b"keybridge"
    sig = restored.key.sign(message, padding.PKCS1v15(), hashes.SHA256())
    # raises InvalidSignature on mismatch
    rsa_private_key.public_key().verify(sig, message, padding.PKCS1v15(), hashes.SHA256())


def test_public_import(rsa_private_key):
    n = rsa_private_key.public_key().public_numbers().n
    native = rsa_converter.import_public(RsaKeyParameters(False, n, 65537))

    assert not native.has_private_key
    assert native.key.public_numbers().n == n
    assert native.key.public_numbers().e == 65537


def test_private_key_rejected_by_public_import(rsa_private_key):
    pair = rsa_converter.export_to_library(NativeRSA(rsa_private_key), include_private=True)
    with pytest.raises(InvalidKeyArgumentError):
        rsa_converter.import_public(pair.private)


def test_sign_byte_is_stripped_and_restored(rsa_private_key):
    n = rsa_private_key.public_key().public_numbers().n
    signed = to_signed_bytes(n)
    # a full-width modulus always has its top bit set
    assert signed[0] == 0x00 and signed[1] & 0x80

    native = rsa_converter.import_public(RsaKeyParameters(False, n, 65537))
    assert native.export_parameters(False).modulus == signed[1:]

    back = rsa_converter.export_to_library(native, include_private=False)
    assert to_signed_bytes(back.public.modulus) == signed


def test_public_only_private_export_rejected(rsa_private_key):
    native = NativeRSA(rsa_private_key.public_key())
    with pytest.raises(InvalidKeyArgumentError):
        rsa_converter.export_to_library(native, include_private=True)


def test_public_export_from_public_key(rsa_private_key):
    native = NativeRSA(rsa_private_key.public_key())
    pair = rsa_converter.export_to_library(native, include_private=False)

    assert pair.private is None
    assert pair.public.exponent == 65537


def test_crt_parameters_positional_order(rsa_private_key):
    numbers = rsa_private_key.private_numbers()
    pub = numbers.public_numbers
    key = RsaPrivateCrtKeyParameters(
        pub.n, pub.e, numbers.d, numbers.p, numbers.q, numbers.dmp1, numbers.dmq1, numbers.iqmp
    )

    assert key.is_private
    assert key.public_exponent == pub.e
    assert key.private_exponent == numbers.d
    assert key.exponent == numbers.d
    assert rsa_converter.import_private(key).key.private_numbers() == numbers


def test_crt_parameters_reject_non_positive_fields(rsa_private_key):
    numbers = rsa_private_key.private_numbers()
    pub = numbers.public_numbers
    with pytest.raises(ValueError):
        RsaPrivateCrtKeyParameters(pub.n, pub.e, numbers.d, numbers.p, 0, numbers.dmp1, numbers.dmq1, numbers.iqmp)
