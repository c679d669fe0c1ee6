"""Identifier derivations for generated network providers.

Every generated identifier comes from these two functions so that the
storage name and the accessor name can never drift apart:

    storage:  {NAME}_PROVIDER
    accessor: get_{name}_provider
"""

from __future__ import annotations

PROVIDER_SUFFIX = "_PROVIDER"
ACCESSOR_PREFIX = "get_"


def storage_identifier(name: str) -> str:
    """Return the name of the shared provider handle for a network.

    >>> storage_identifier('Ethereum')
    'ETHEREUM_PROVIDER'
    >>> storage_identifier('polygon_zkevm')
    'POLYGON_ZKEVM_PROVIDER'
    """
    return f"{name.upper()}{PROVIDER_SUFFIX}"


def accessor_identifier(name: str) -> str:
    """Return the name of the function that hands out the provider.

    Other generators use this to reference a network's provider without
    running the full networks generator.

    >>> accessor_identifier('Ethereum')
    'get_ethereum_provider'
    """
    return f"{ACCESSOR_PREFIX}{storage_identifier(name).lower()}"
