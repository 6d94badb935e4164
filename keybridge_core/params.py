"""
keybridge_core.params
---------------------
Library-side key parameter objects.

Numeric fields are plain Python ints (arbitrary precision, signed);
byte export (utils.to_signed_bytes) uses the minimal two's-complement
layout, so any value with its top bit set gains a leading 0x00.

A private parameter object always carries the public values it was
derived from: RSA CRT keys repeat modulus and public exponent, DSA
public and private keys of one pair share a single DsaParameters.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


def _check_uint(name: str, value: int, allow_zero: bool = True) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ValueError(f"{name} must be positive")


@dataclass(frozen=True)
class AsymmetricKeyParameter:
    is_private: bool


@dataclass(frozen=True)
class RsaKeyParameters(AsymmetricKeyParameter):
    modulus: int
    exponent: int

    def __post_init__(self):
        _check_uint("modulus", self.modulus, allow_zero=False)
        _check_uint("exponent", self.exponent, allow_zero=False)


@dataclass(frozen=True, init=False)
class RsaPrivateCrtKeyParameters(RsaKeyParameters):
    """
    RSA private key in CRT form.

    Positional order is (modulus, public_exponent, private_exponent, p, q,
    dp, dq, qinv). `exponent` holds the private exponent (d); the public
    exponent (e) is kept separately in `public_exponent`.
    """
    public_exponent: int
    p: int
    q: int
    dp: int
    dq: int
    qinv: int

    def __init__(self, modulus: int, public_exponent: int, private_exponent: int,
                 p: int, q: int, dp: int, dq: int, qinv: int):
        values = {
            "is_private": True,
            "modulus": modulus,
            "exponent": private_exponent,
            "public_exponent": public_exponent,
            "p": p,
            "q": q,
            "dp": dp,
            "dq": dq,
            "qinv": qinv,
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)
        self.__post_init__()

    def __post_init__(self):
        super().__post_init__()
        _check_uint("public_exponent", self.public_exponent, allow_zero=False)
        for name in ("p", "q", "dp", "dq", "qinv"):
            _check_uint(name, getattr(self, name), allow_zero=False)

    @property
    def private_exponent(self) -> int:
        return self.exponent


@dataclass(frozen=True)
class DsaValidationParameters:
    seed: bytes
    counter: int

    def __post_init__(self):
        if not isinstance(self.seed, (bytes, bytearray)):
            raise TypeError("seed must be bytes")
        object.__setattr__(self, "seed", bytes(self.seed))
        _check_uint("counter", self.counter)


@dataclass(frozen=True)
class DsaParameters:
    p: int
    q: int
    g: int
    validation_parameters: Optional[DsaValidationParameters] = None

    def __post_init__(self):
        for name in ("p", "q", "g"):
            _check_uint(name, getattr(self, name), allow_zero=False)


def _check_domain(parameters) -> None:
    if not isinstance(parameters, DsaParameters):
        raise TypeError(f"parameters must be DsaParameters, got {type(parameters).__name__}")


@dataclass(frozen=True)
class DsaKeyParameters(AsymmetricKeyParameter):
    parameters: DsaParameters


@dataclass(frozen=True)
class DsaPublicKeyParameters(DsaKeyParameters):
    is_private: bool = field(default=False, init=False)
    y: int = 0

    def __post_init__(self):
        _check_domain(self.parameters)
        _check_uint("y", self.y, allow_zero=False)


@dataclass(frozen=True)
class DsaPrivateKeyParameters(DsaKeyParameters):
    is_private: bool = field(default=True, init=False)
    x: int = 0

    def __post_init__(self):
        _check_domain(self.parameters)
        _check_uint("x", self.x, allow_zero=False)


@dataclass(frozen=True)
class AsymmetricCipherKeyPair:
    public: AsymmetricKeyParameter
    private: Optional[AsymmetricKeyParameter] = None

    def __post_init__(self):
        if self.public.is_private:
            raise ValueError("public component must not be a private key")
        if self.private is not None and not self.private.is_private:
            raise ValueError("private component must be a private key")
