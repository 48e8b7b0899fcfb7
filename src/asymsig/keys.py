"""Asymmetric key variants accepted by the signature providers.

Two kinds of key exist: raw RSA parameters (`RsaSecurityKey`) and an X.509 certificate carrying an RSA public key,
optionally paired with the matching private key (`X509SecurityKey`).

Typical usage example:

    key = X509SecurityKey.import_certificate(pathlib.Path("signer.crt"), pathlib.Path("signer.pem"))
    key.key_size
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import abc
import pathlib
import typing

from pyasn1.codec.der import decoder
from pyasn1_modules import rfc5280
from pyasn1_modules import rfc8017

from asymsig import errors
from asymsig import rsa


class RSAParameters(typing.NamedTuple):
    """Raw RSA key components. Only `modulus` and `exponent` are mandatory."""
    modulus: int
    exponent: int
    d: int | None = None
    p: int | None = None
    q: int | None = None
    dp: int | None = None
    dq: int | None = None
    inverse_q: int | None = None


class AsymmetricSecurityKey(abc.ABC):
    """Common surface of every asymmetric key."""

    @property
    @abc.abstractmethod
    def key_size(self) -> int:
        ...

    @property
    @abc.abstractmethod
    def has_private_key(self) -> bool:
        ...


class RsaSecurityKey(AsymmetricSecurityKey):
    """An RSA key built from its raw parameters.

    Attributes:
        parameters: The RSA components this key was created from.
    """

    def __init__(self, parameters: RSAParameters) -> None:
        self.parameters = parameters

    @property
    def key_size(self) -> int:
        return self.parameters.modulus.bit_length()

    @property
    def has_private_key(self) -> bool:
        return self.parameters.d is not None

    def import_parameters(self) -> rsa.RSAPubKey | rsa.RSAPrivKey:
        """Imports the parameters into a fresh RSA computation context.

        Returns:
            A private context if the private exponent is known, otherwise a public one.
        """
        prm = self.parameters
        if prm.d is None:
            return rsa.RSAPubKey(prm.modulus, prm.exponent)
        return rsa.RSAPrivKey(prm.modulus, prm.exponent, prm.d, prm.p, prm.q, prm.dp, prm.dq, prm.inverse_q)


class X509SecurityKey(AsymmetricSecurityKey):
    """An RSA key embedded in an X.509 certificate.

    The certificate is parsed once on creation. Its public key is always available, the private key only if one
    was handed over along with the certificate. This key keeps ownership of that private key.

    Attributes:
        certificate: The DER encoded certificate.
        public_key: The certificate's RSA public key.
        private_key: The matching private key, if supplied.
    """

    def __init__(self, certificate: bytes, private_key: rsa.RSAPrivKey | None = None) -> None:
        """Parse the certificate and pair it with the private key.

        Args:
            certificate: DER encoded X.509 certificate.
            private_key: Optional private key matching the certificate.

        Raises:
            UnsupportedKeyTypeError: If the certificate does not carry an RSA public key.
            ValueError: If the private key does not belong to the certificate.
        """
        cert, _ = decoder.decode(certificate, asn1Spec=rfc5280.Certificate())
        spki = cert["tbsCertificate"]["subjectPublicKeyInfo"]
        key_algorithm = spki["algorithm"]["algorithm"]
        if key_algorithm != rfc8017.rsaEncryption:
            raise errors.UnsupportedKeyTypeError(str(key_algorithm), type(self).__name__)
        self.certificate = certificate
        self.public_key = rsa.RSAPubKey.from_der(spki["subjectPublicKey"].asOctets())
        if private_key is not None and private_key.mod != self.public_key.mod:
            raise ValueError("Private key does not match the certificate public key.")
        self.private_key = private_key

    @property
    def key_size(self) -> int:
        return self.public_key.key_size

    @property
    def has_private_key(self) -> bool:
        return self.private_key is not None

    @classmethod
    def import_certificate(cls,
                           file: pathlib.Path,
                           private_key_file: pathlib.Path | None = None) -> "X509SecurityKey":
        """Loads a PEM certificate, and optionally its PKCS8 private key, from file.

        Args:
            file: The PEM certificate.
            private_key_file: The PKCS8 PEM private key belonging to the certificate.

        Returns:
            The certificate key.
        """
        private_key = None
        if private_key_file is not None:
            private_key = rsa.RSAPrivKey.import_key(private_key_file)
        return cls(rsa.read_pem(file, "X509"), private_key)
