"""Signature algorithm identifiers and their hash bindings.

The identifiers are the XML-DSig URIs used by token formats. Matching is exact and case-sensitive.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import hashlib
import typing

from pyasn1_modules import rfc3279
from pyasn1_modules import rfc8017


class SecurityAlgorithms:
    RSA_SHA1 = "http://www.w3.org/2000/09/xmldsig#rsa-sha1"
    RSA_SHA256 = "http://www.w3.org/2001/04/xmldsig-more#rsa-sha256"
    RSA_SHA384 = "http://www.w3.org/2001/04/xmldsig-more#rsa-sha384"
    RSA_SHA512 = "http://www.w3.org/2001/04/xmldsig-more#rsa-sha512"


# name: (constructor, DigestInfo OID, digest length)
HASH_TLL = {
    "sha1": (hashlib.sha1, rfc3279.id_sha1, 20),
    "sha256": (hashlib.sha256, rfc8017.id_sha256, 32),
    "sha384": (hashlib.sha384, rfc8017.id_sha384, 48),
    "sha512": (hashlib.sha512, rfc8017.id_sha512, 64),
}

SIGNATURE_HASHES = {
    SecurityAlgorithms.RSA_SHA1: "sha1",
    SecurityAlgorithms.RSA_SHA256: "sha256",
    SecurityAlgorithms.RSA_SHA384: "sha384",
    SecurityAlgorithms.RSA_SHA512: "sha512",
}


class HashBinding(typing.NamedTuple):
    """The digest a provider is bound to."""
    name: str
    digest_size: int


def is_rsa_algorithm(algorithm: str | None) -> bool:
    """Whether `algorithm` names one of the RSA signature schemes we bind a hash for.

    Args:
        algorithm: The algorithm identifier. None or empty is never supported.

    Returns:
        True if the identifier is known, False otherwise.
    """
    if not algorithm:
        return False
    return algorithm in SIGNATURE_HASHES


def resolve_hash(algorithm: str | None) -> HashBinding | None:
    """Looks up the hash binding of an algorithm identifier, None if it has none."""
    if not is_rsa_algorithm(algorithm):
        return None
    name = SIGNATURE_HASHES[algorithm]
    return HashBinding(name, HASH_TLL[name][2])
