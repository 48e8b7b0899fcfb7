"""Errors raised by the signature providers.

Every error also derives from the builtin exception a caller would reach for, so `except ValueError` keeps
catching a weak key or an empty payload.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class SignatureProviderError(Exception):
    """Base class of all provider errors."""


class NullKeyError(SignatureProviderError, TypeError):

    def __init__(self) -> None:
        super().__init__("A key is required, got None.")


class NullInputError(SignatureProviderError, TypeError):

    def __init__(self) -> None:
        super().__init__("Input must not be None.")


class NullSignatureError(SignatureProviderError, TypeError):

    def __init__(self) -> None:
        super().__init__("Signature must not be None.")


class EmptyInputError(SignatureProviderError, ValueError):

    def __init__(self) -> None:
        super().__init__("Input must not be empty.")


class EmptySignatureError(SignatureProviderError, ValueError):

    def __init__(self) -> None:
        super().__init__("Signature must not be empty.")


class KeyTooWeakError(SignatureProviderError, ValueError):
    """Raised when a key is smaller than the configured floor.

    Attributes:
        key_size: Size of the rejected key in bits.
        key_type: Name of the rejected key's type.
        minimum: The floor the key failed to meet.
    """
    usage = "use"

    def __init__(self, key_size: int, key_type: str, minimum: int) -> None:
        self.key_size = key_size
        self.key_type = key_type
        self.minimum = minimum
        super().__init__(f"Key of type {key_type} is {key_size} bits, {self.usage} requires at least {minimum} bits.")


class KeyTooWeakForSigningError(KeyTooWeakError):
    usage = "signing"


class KeyTooWeakForVerifyingError(KeyTooWeakError):
    usage = "verifying"


class UnsupportedKeyTypeError(SignatureProviderError, TypeError):

    def __init__(self, algorithm: str | None, key_type: str) -> None:
        self.algorithm = algorithm
        self.key_type = key_type
        super().__init__(f"Algorithm or key type not supported: {algorithm}, {key_type}")


class UnsupportedAlgorithmError(SignatureProviderError, ValueError):

    def __init__(self, algorithm: str | None) -> None:
        self.algorithm = algorithm
        super().__init__(f"Algorithm not supported: {algorithm!r}")


class PrivateKeyUnavailableError(SignatureProviderError, ValueError):
    """The key carries no RSA private key, but signatures were requested."""


class AlreadyDisposedError(SignatureProviderError, RuntimeError):

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name} has been disposed.")


class MissingHashAlgorithmError(SignatureProviderError, RuntimeError):

    def __init__(self) -> None:
        super().__init__("No hash algorithm is bound to this provider.")


class CryptographicError(SignatureProviderError, RuntimeError):
    """The RSA primitive failed. The original exception is chained as the cause."""
