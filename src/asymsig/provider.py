"""Signature providers binding one key, one algorithm and one intent.

A provider is constructed once per (key, algorithm, intent), used for any number of `sign`/`verify` calls and then
disposed, either explicitly or by leaving a `with` block.

Typical usage example:

    with AsymmetricSignatureProvider(key, SecurityAlgorithms.RSA_SHA256, will_create_signatures=True) as signer:
        sig = signer.sign(b"payload")
    with AsymmetricSignatureProvider(key, SecurityAlgorithms.RSA_SHA256) as verifier:
        verifier.verify(b"payload", sig)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import abc
import enum
import logging
import threading
import warnings

from asymsig import algorithms
from asymsig import errors
from asymsig import rsa
from asymsig.config import DEFAULT_SETTINGS
from asymsig.config import ProviderSettings
from asymsig.keys import RsaSecurityKey
from asymsig.keys import X509SecurityKey

logger = logging.getLogger(__name__)


class Ownership(enum.Enum):
    """Who releases the RSA computation context of a provider."""
    OWNED = "owned"
    BORROWED = "borrowed"


class SignatureProvider(abc.ABC):
    """The capability every signature provider offers."""

    @abc.abstractmethod
    def sign(self, data: bytes) -> bytes:
        ...

    @abc.abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        ...

    @abc.abstractmethod
    def is_supported_algorithm(self, key, algorithm: str | None) -> bool:
        ...

    @abc.abstractmethod
    def dispose(self) -> None:
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()


class AsymmetricSignatureProvider(SignatureProvider):
    """Creates and verifies RSASSA-PKCS1-v1_5 signatures with an RSA or X.509 key.

    Attributes:
        algorithm: The signature algorithm identifier the provider was built for.
        will_create_signatures: Whether the provider was built to sign.
    """

    def __init__(self,
                 key: RsaSecurityKey | X509SecurityKey,
                 algorithm: str,
                 will_create_signatures: bool = False,
                 settings: ProviderSettings = DEFAULT_SETTINGS) -> None:
        """Validate the key and resolve the computation context and hash.

        Verifying needs only public key material, signing needs the private key and a larger key.

        Args:
            key: The key to sign or verify with.
            algorithm: One of the `SecurityAlgorithms` identifiers.
            will_create_signatures: True if the provider has to create signatures.
            settings: Minimum key sizes and algorithm strictness.

        Raises:
            NullKeyError: If `key` is None.
            KeyTooWeakForSigningError: If signing and the key is below the signing floor.
            KeyTooWeakForVerifyingError: If the key is below the verifying floor. Always checked.
            UnsupportedKeyTypeError: If the key is neither an RSA nor an X.509 key.
            PrivateKeyUnavailableError: If signing with a certificate that has no RSA private key.
            UnsupportedAlgorithmError: If strict and `algorithm` has no hash binding.
            CryptographicError: If the RSA parameters cannot be imported.
        """
        if key is None:
            raise errors.NullKeyError()
        key_type = type(key).__name__
        key_size = getattr(key, "key_size", None)
        if not isinstance(key_size, int):
            raise errors.UnsupportedKeyTypeError(algorithm, key_type)
        # TODO: Make the floors depend on the hash strength of the algorithm.
        if will_create_signatures and key_size < settings.minimum_key_size_for_signing:
            raise errors.KeyTooWeakForSigningError(key_size, key_type, settings.minimum_key_size_for_signing)
        if key_size < settings.minimum_key_size_for_verifying:
            raise errors.KeyTooWeakForVerifyingError(key_size, key_type, settings.minimum_key_size_for_verifying)

        match key:
            case RsaSecurityKey():
                try:
                    context = key.import_parameters()
                except (ValueError, ArithmeticError) as exc:
                    raise errors.CryptographicError("Unable to import RSA parameters.") from exc
                ownership = Ownership.OWNED
            case X509SecurityKey() if will_create_signatures:
                if not isinstance(key.private_key, rsa.RSAPrivKey):
                    raise errors.PrivateKeyUnavailableError(
                        f"{key_type} holds no RSA private key, which is required to create signatures.")
                context = key.private_key
                ownership = Ownership.BORROWED
            case X509SecurityKey():
                context = key.public_key.copy()
                ownership = Ownership.OWNED
            case _:
                raise errors.UnsupportedKeyTypeError(algorithm, key_type)

        hash_binding = algorithms.resolve_hash(algorithm)
        if hash_binding is None and settings.strict_algorithms:
            raise errors.UnsupportedAlgorithmError(algorithm)
        if hash_binding is not None and hash_binding.name == "sha1" and will_create_signatures:
            warnings.warn("SHA-1 signatures are weak! Please use with care.", RuntimeWarning)

        self.algorithm = algorithm
        self.will_create_signatures = will_create_signatures
        self._context: rsa.RSAPubKey | rsa.RSAPrivKey | None = context
        self._ownership = ownership
        self._hash = hash_binding
        self._disposed = False
        self._lock = threading.Lock()
        logger.debug("Created %s provider for %s with %d bit %s (%s context).",
                     "signing" if will_create_signatures else "verifying", algorithm, key_size, key_type,
                     ownership.value)

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    @property
    def hash_binding(self) -> algorithms.HashBinding | None:
        return self._hash

    def is_supported_algorithm(self, key, algorithm: str | None) -> bool:
        """Whether `algorithm` can be used with `key`, judged by the key's runtime type."""
        if not algorithm:
            return False
        if isinstance(key, RsaSecurityKey):
            return self.is_supported_rsa_algorithm(key, algorithm)
        if isinstance(key, X509SecurityKey):
            return self.is_supported_x509_algorithm(key, algorithm)
        return False

    @staticmethod
    def is_supported_rsa_algorithm(key: RsaSecurityKey, algorithm: str | None) -> bool:
        return algorithms.is_rsa_algorithm(algorithm)

    @staticmethod
    def is_supported_x509_algorithm(key: X509SecurityKey, algorithm: str | None) -> bool:
        return algorithms.is_rsa_algorithm(algorithm)

    def _ensure_usable(self) -> None:
        """Must be called with the lock held."""
        if self._disposed:
            raise errors.AlreadyDisposedError(type(self).__name__)
        if self._hash is None:
            raise errors.MissingHashAlgorithmError()

    def sign(self, data: bytes) -> bytes:
        """Produces a signature over `data`.

        Args:
            data: The bytes to sign.

        Returns:
            The signature, as long as the key's modulus.

        Raises:
            NullInputError: If `data` is None.
            EmptyInputError: If `data` is empty.
            AlreadyDisposedError: If the provider was disposed.
            MissingHashAlgorithmError: If no hash is bound.
            CryptographicError: If the context cannot sign, e.g. holds no private key.
        """
        if data is None:
            raise errors.NullInputError()
        if len(data) == 0:
            raise errors.EmptyInputError()
        with self._lock:
            self._ensure_usable()
            try:
                return self._context.sign(data, self._hash.name)
            except (ValueError, RuntimeError) as exc:
                raise errors.CryptographicError(f"Signature creation failed: {exc}") from exc

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Verifies that `signature` is a signature over `data`.

        A signature that does not match returns False. Every other problem raises.

        Args:
            data: The bytes the signature was made over.
            signature: The signature to check.

        Returns:
            True if the signature matches, False otherwise.

        Raises:
            NullInputError: If `data` is None.
            NullSignatureError: If `signature` is None.
            EmptyInputError: If `data` is empty.
            EmptySignatureError: If `signature` is empty.
            AlreadyDisposedError: If the provider was disposed.
            MissingHashAlgorithmError: If no hash is bound.
        """
        if data is None:
            raise errors.NullInputError()
        if signature is None:
            raise errors.NullSignatureError()
        if len(data) == 0:
            raise errors.EmptyInputError()
        if len(signature) == 0:
            raise errors.EmptySignatureError()
        with self._lock:
            self._ensure_usable()
            try:
                return self._context.verify(data, signature, self._hash.name)
            except ValueError as exc:
                raise errors.CryptographicError(f"Signature verification failed: {exc}") from exc

    def dispose(self) -> None:
        """Releases the hash binding and any context this provider owns. Safe to call repeatedly."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self._hash = None
            if self._ownership is Ownership.OWNED:
                self._context.wipe()
            self._context = None
        logger.debug("Disposed provider for %s.", self.algorithm)
