"""Split composite user entitlements versions."""

from __future__ import annotations

import math

from .errors import InvalidArgumentError

# The fractional part of a user entitlements version carries the
# entitlements set version scaled by this factor.
ENTITLEMENTS_SET_VERSION_SCALE = 100000


def split_version(version: float) -> tuple[int, int]:
    """Split a user entitlements version into its two component versions.

    The integer part is the user entitlements version; the fractional part,
    scaled by ``ENTITLEMENTS_SET_VERSION_SCALE``, is the version of the
    entitlements set the user entitlements were derived from::

        >>> split_version(20.0001)
        (20, 10)

    Raises:
        InvalidArgumentError: ``"version negative"`` if ``version < 0``;
            ``"version not finite"`` for NaN or infinity;
            ``"version too precise"`` if the split does not reproduce
            ``version`` exactly.
    """
    if version < 0:
        raise InvalidArgumentError("version negative")
    if not math.isfinite(version):
        raise InvalidArgumentError("version not finite")

    # floor, not round: round would carry fractions >= .5 into the user version.
    user_entitlements_version = math.floor(version)
    entitlements_set_version = round(
        math.fmod(version * ENTITLEMENTS_SET_VERSION_SCALE, ENTITLEMENTS_SET_VERSION_SCALE)
    )

    rebuilt = user_entitlements_version + entitlements_set_version / ENTITLEMENTS_SET_VERSION_SCALE
    if rebuilt != version:
        raise InvalidArgumentError("version too precise")

    return user_entitlements_version, entitlements_set_version
