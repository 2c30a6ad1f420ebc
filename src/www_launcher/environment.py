"""Child process environment for the delegated task."""

import os
from collections.abc import Mapping
from types import MappingProxyType

# Lets an outdated webpack/Node.js toolchain use OpenSSL 3 legacy algorithms
# (md4 hashing). Drop once the www dependencies are upgraded.
LEGACY_OPENSSL_ENV: Mapping[str, str] = MappingProxyType(
    {"NODE_OPTIONS": "--openssl-legacy-provider"}
)


def build_child_env(
    base: Mapping[str, str] | None = None,
    overlay: Mapping[str, str] = LEGACY_OPENSSL_ENV,
) -> dict[str, str]:
    """Return a copy of ``base`` (default: ``os.environ``) with ``overlay`` applied.
    
    ``base`` itself is left untouched.
    """
    env = dict(os.environ if base is None else base)
    env.update(overlay)
    return env


def describe_overlay(overlay: Mapping[str, str]) -> str:
    """Format overlay entries for log output."""
    if not overlay:
        return "none"
    return " ".join(f"{key}={value}" for key, value in overlay.items())
