"""Provider settings."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class ProviderSettings(typing.NamedTuple):
    """Thresholds and switches consulted while constructing a provider.

    Attributes:
        minimum_key_size_for_signing: Smallest key, in bits, accepted for creating signatures.
        minimum_key_size_for_verifying: Smallest key, in bits, accepted at all.
        strict_algorithms: If True an algorithm without a hash binding fails construction. If False the provider
            is built without a hash and every sign/verify raises `MissingHashAlgorithmError`.
    """
    minimum_key_size_for_signing: int = 2048
    minimum_key_size_for_verifying: int = 1024
    strict_algorithms: bool = True


DEFAULT_SETTINGS = ProviderSettings()
