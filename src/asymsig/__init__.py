"""RSA signature providers for token signing and verification.

Binds an RSA key (raw parameters or an X.509 certificate), a signature algorithm and an intent into a provider
that creates or verifies RSASSA-PKCS1-v1_5 signatures, validating key strength on the way in.

Typical usage example:

    key = RsaSecurityKey(RSAParameters(modulus, exponent, d))
    with AsymmetricSignatureProvider(key, SecurityAlgorithms.RSA_SHA256, will_create_signatures=True) as signer:
        sig = signer.sign(b"Hi there!")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from asymsig.algorithms import SecurityAlgorithms
from asymsig.config import DEFAULT_SETTINGS
from asymsig.config import ProviderSettings
from asymsig.errors import AlreadyDisposedError
from asymsig.errors import CryptographicError
from asymsig.errors import EmptyInputError
from asymsig.errors import EmptySignatureError
from asymsig.errors import KeyTooWeakForSigningError
from asymsig.errors import KeyTooWeakForVerifyingError
from asymsig.errors import MissingHashAlgorithmError
from asymsig.errors import NullInputError
from asymsig.errors import NullKeyError
from asymsig.errors import NullSignatureError
from asymsig.errors import PrivateKeyUnavailableError
from asymsig.errors import SignatureProviderError
from asymsig.errors import UnsupportedAlgorithmError
from asymsig.errors import UnsupportedKeyTypeError
from asymsig.keys import AsymmetricSecurityKey
from asymsig.keys import RSAParameters
from asymsig.keys import RsaSecurityKey
from asymsig.keys import X509SecurityKey
from asymsig.provider import AsymmetricSignatureProvider
from asymsig.provider import Ownership
from asymsig.provider import SignatureProvider

__version__ = "0.1.0"
__all__ = [
    "AsymmetricSecurityKey",
    "AsymmetricSignatureProvider",
    "DEFAULT_SETTINGS",
    "Ownership",
    "ProviderSettings",
    "RSAParameters",
    "RsaSecurityKey",
    "SecurityAlgorithms",
    "SignatureProvider",
    "X509SecurityKey",
    "AlreadyDisposedError",
    "CryptographicError",
    "EmptyInputError",
    "EmptySignatureError",
    "KeyTooWeakForSigningError",
    "KeyTooWeakForVerifyingError",
    "MissingHashAlgorithmError",
    "NullInputError",
    "NullKeyError",
    "NullSignatureError",
    "PrivateKeyUnavailableError",
    "SignatureProviderError",
    "UnsupportedAlgorithmError",
    "UnsupportedKeyTypeError",
]
