"""Capability Dispatch - Root Package.

This package provides a capability-dispatch facade: a factory that turns a
runtime discriminator plus an explicit configuration bundle into an adapter,
and adapters that expose heterogeneous actors through one capability set.

Key Components:
    - domain: Capability port, contract checks and exceptions
    - application: Variant factory, client and substitutability checks
    - infrastructure: Adapters, variant registry and logging
    - variants: Built-in bicycle and car variants
    - config: Configuration schemas and loading
    - cli: Command-line interface
"""

from ._package import PACKAGE_NAME
from ._version import __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]
