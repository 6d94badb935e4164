"""
keybridge_core.native
---------------------
Native key objects backed by `cryptography` keys.

Key material crosses this boundary only as RSAParameters / DSAParameters:
every numeric field is a big-endian unsigned byte string with a fixed
width derived from the key size (no sign byte, leading zeros allowed).

- NativeRSA, NativeDSA: opaque key holders, export_parameters() /
  import_parameters()
- wrap_native_key(): accept a raw cryptography key or a NativeKey
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from cryptography.hazmat.primitives.asymmetric import dsa, rsa
from .constants import ALGORITHM_DSA, ALGORITHM_RSA
from .errors import InvalidKeyArgumentError, UnsupportedKeyError
from .utils import to_big_integer, to_fixed_bytes


def _field(value: int, size: int) -> bytes:
    # Pad to the structure's width; never truncate an oversized value.
    return to_fixed_bytes(value).rjust(size, b"\0")


@dataclass
class RSAParameters:
    modulus: Optional[bytes] = None
    exponent: Optional[bytes] = None
    d: Optional[bytes] = None
    p: Optional[bytes] = None
    q: Optional[bytes] = None
    dp: Optional[bytes] = None
    dq: Optional[bytes] = None
    inverse_q: Optional[bytes] = None

    PRIVATE_FIELDS = ("d", "p", "q", "dp", "dq", "inverse_q")

    @property
    def has_private(self) -> bool:
        return any(getattr(self, name) is not None for name in self.PRIVATE_FIELDS)


@dataclass
class DSAParameters:
    p: Optional[bytes] = None
    q: Optional[bytes] = None
    g: Optional[bytes] = None
    y: Optional[bytes] = None
    x: Optional[bytes] = None
    seed: Optional[bytes] = None  # None means "no validation parameters"
    counter: int = 0

    @property
    def has_private(self) -> bool:
        return self.x is not None


class NativeKey:
    algorithm: str = ""

    def __init__(self, key):
        self._key = key

    @property
    def key(self):
        """The backing cryptography key object."""
        return self._key

    @property
    def has_private_key(self) -> bool:
        raise NotImplementedError

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def export_parameters(self, include_private: bool):
        raise NotImplementedError

    def __repr__(self) -> str:
        kind = "private" if self.has_private_key else "public"
        return f"{type(self).__name__}({kind}, {self.key_size} bits)"


class NativeRSA(NativeKey):
    algorithm = ALGORITHM_RSA

    def __init__(self, key):
        if not isinstance(key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
            raise TypeError(f"NativeRSA needs an RSA key, got {type(key).__name__}")
        super().__init__(key)

    @property
    def has_private_key(self) -> bool:
        return isinstance(self._key, rsa.RSAPrivateKey)

    def export_parameters(self, include_private: bool) -> RSAParameters:
        if include_private and not self.has_private_key:
            raise InvalidKeyArgumentError("RSA key has no private material to export.")

        if self.has_private_key:
            numbers = self._key.private_numbers()
            public = numbers.public_numbers
        else:
            numbers = None
            public = self._key.public_numbers()

        modulus = to_fixed_bytes(public.n)
        params = RSAParameters(modulus=modulus, exponent=to_fixed_bytes(public.e))
        if not include_private:
            return params

        size = len(modulus)
        half = (size + 1) >> 1
        params.d = _field(numbers.d, size)
        params.p = _field(numbers.p, half)
        params.q = _field(numbers.q, half)
        params.dp = _field(numbers.dmp1, half)
        params.dq = _field(numbers.dmq1, half)
        params.inverse_q = _field(numbers.iqmp, half)
        return params

    @classmethod
    def import_parameters(cls, params: RSAParameters) -> "NativeRSA":
        if not params.modulus or not params.exponent:
            raise InvalidKeyArgumentError("RSA parameters need a modulus and an exponent.")

        public = rsa.RSAPublicNumbers(
            e=to_big_integer(params.exponent),
            n=to_big_integer(params.modulus),
        )
        if not params.has_private:
            return cls(public.public_key())

        missing = [name for name in RSAParameters.PRIVATE_FIELDS if not getattr(params, name)]
        if missing:
            raise InvalidKeyArgumentError(f"RSA private parameters missing: {', '.join(missing)}")

        private = rsa.RSAPrivateNumbers(
            p=to_big_integer(params.p),
            q=to_big_integer(params.q),
            d=to_big_integer(params.d),
            dmp1=to_big_integer(params.dp),
            dmq1=to_big_integer(params.dq),
            iqmp=to_big_integer(params.inverse_q),
            public_numbers=public,
        )
        try:
            return cls(private.private_key())
        except ValueError as e:
            raise InvalidKeyArgumentError(f"Inconsistent RSA private parameters: {e}") from e


class NativeDSA(NativeKey):
    algorithm = ALGORITHM_DSA

    def __init__(self, key, seed: Optional[bytes] = None, counter: int = 0):
        if not isinstance(key, (dsa.DSAPrivateKey, dsa.DSAPublicKey)):
            raise TypeError(f"NativeDSA needs a DSA key, got {type(key).__name__}")
        if not isinstance(counter, int) or isinstance(counter, bool) or counter < 0:
            raise InvalidKeyArgumentError(f"DSA counter must be a non-negative int, got {counter!r}")
        super().__init__(key)
        # cryptography keys have no slot for FIPS 186 validation data
        self._seed = bytes(seed) if seed is not None else None
        self._counter = counter if seed is not None else 0

    @property
    def has_private_key(self) -> bool:
        return isinstance(self._key, dsa.DSAPrivateKey)

    @property
    def seed(self) -> Optional[bytes]:
        return self._seed

    @property
    def counter(self) -> int:
        return self._counter

    def export_parameters(self, include_private: bool) -> DSAParameters:
        if include_private and not self.has_private_key:
            raise InvalidKeyArgumentError("DSA key has no private material to export.")

        if self.has_private_key:
            numbers = self._key.private_numbers()
            public = numbers.public_numbers
        else:
            numbers = None
            public = self._key.public_numbers()
        domain = public.parameter_numbers

        p = to_fixed_bytes(domain.p)
        q = to_fixed_bytes(domain.q)
        params = DSAParameters(
            p=p,
            q=q,
            g=_field(domain.g, len(p)),
            y=_field(public.y, len(p)),
            seed=self._seed,
            counter=self._counter,
        )
        if include_private:
            params.x = _field(numbers.x, len(q))
        return params

    @classmethod
    def import_parameters(cls, params: DSAParameters) -> "NativeDSA":
        if not (params.p and params.q and params.g):
            raise InvalidKeyArgumentError("DSA parameters need P, Q and G.")
        if not params.y and not params.x:
            raise InvalidKeyArgumentError("DSA parameters need Y or X.")

        domain = dsa.DSAParameterNumbers(
            p=to_big_integer(params.p),
            q=to_big_integer(params.q),
            g=to_big_integer(params.g),
        )
        x = to_big_integer(params.x) if params.x else None
        if params.y:
            y = to_big_integer(params.y)
        else:
            y = pow(domain.g, x, domain.p)

        public = dsa.DSAPublicNumbers(y=y, parameter_numbers=domain)
        try:
            if x is None:
                key = public.public_key()
            else:
                key = dsa.DSAPrivateNumbers(x=x, public_numbers=public).private_key()
        except ValueError as e:
            raise InvalidKeyArgumentError(f"Inconsistent DSA parameters: {e}") from e
        return cls(key, seed=params.seed, counter=params.counter)


def wrap_native_key(obj) -> NativeKey:
    """Return `obj` as a NativeKey, wrapping raw cryptography RSA/DSA keys."""
    if isinstance(obj, NativeKey):
        return obj
    if isinstance(obj, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
        return NativeRSA(obj)
    if isinstance(obj, (dsa.DSAPrivateKey, dsa.DSAPublicKey)):
        return NativeDSA(obj)
    raise UnsupportedKeyError(f"'{type(obj).__name__}' is currently not supported.")
