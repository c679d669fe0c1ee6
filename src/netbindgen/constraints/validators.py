"""Constraint predicates for a network manifest.

The networks generator trusts its input completely. These checks are the
loader's side of that contract and run before generation:

Field Constraints — run on each Network on its own.
Cross-Record Constraints — run on the whole ordered network list.

The loader copies TOML values through unchecked, so a field may hold any
TOML type; every check tests the type before using the value.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from netbindgen.constraints.errors import (
    ManifestValidation,
    NetworkViolation,
    Severity,
)
from netbindgen.derivations.naming import storage_identifier
from netbindgen.models.network import Network

_RUST_IDENT_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

# Characters that would terminate or corrupt the emitted string literal.
_UNSAFE_URL_CHARS = ('"', '\\', '\n', '\r')

# Violations that leave nothing to render, so --force cannot override them.
UNRENDERABLE_CODES = frozenset({"invalid_name", "invalid_url"})


def _usable_name(network: Network) -> str:
    return network.name if isinstance(network.name, str) else ""


def _violation(
    severity: Severity, code: str, message: str,
    index: int, network: Network, field: str,
) -> NetworkViolation:
    return NetworkViolation(
        severity=severity,
        code=code,
        message=message,
        index=index,
        network=_usable_name(network),
        field=field,
    )


# ---------------------------------------------------------------------------
# Field Constraints
# ---------------------------------------------------------------------------

def _check_name(index: int, network: Network, result: ManifestValidation) -> None:
    name = network.name
    if not isinstance(name, str):
        result.add(_violation(
            Severity.ERROR, "invalid_name",
            f"Name must be a string, got {name!r}",
            index, network, "name",
        ))
    elif not name:
        result.add(_violation(
            Severity.ERROR, "missing_name",
            f"No network name (url={network.url!r})",
            index, network, "name",
        ))
    elif not _RUST_IDENT_RE.match(storage_identifier(name)):
        result.add(_violation(
            Severity.ERROR, "invalid_identifier",
            f"Name {name!r} derives {storage_identifier(name)!r}, "
            f"which is not a valid identifier",
            index, network, "name",
        ))


def _check_url(index: int, network: Network, result: ManifestValidation) -> None:
    url = network.url
    if not isinstance(url, str):
        result.add(_violation(
            Severity.ERROR, "invalid_url",
            f"Url must be a string, got {url!r}",
            index, network, "url",
        ))
    elif not url:
        result.add(_violation(
            Severity.ERROR, "missing_url",
            "No url",
            index, network, "url",
        ))
    elif any(c in url for c in _UNSAFE_URL_CHARS):
        result.add(_violation(
            Severity.ERROR, "unsafe_url",
            f"Url {url!r} cannot be embedded in a string literal",
            index, network, "url",
        ))


def _check_compute_units(index: int, network: Network, result: ManifestValidation) -> None:
    cu = network.compute_units_per_second
    if not network.has_compute_units:
        return
    if isinstance(cu, bool) or not isinstance(cu, int) or cu <= 0:
        result.add(_violation(
            Severity.ERROR, "invalid_compute_units",
            f"Must be a positive integer, got {cu!r}",
            index, network, "compute_units_per_second",
        ))


def validate_field_constraints(networks: Sequence[Network]) -> ManifestValidation:
    """Validate each network's fields.

    Checks:
    - name and url must be non-empty strings
    - the derived storage identifier must be a valid Rust identifier
    - url must be embeddable in a Rust string literal as-is
    - compute_units_per_second, when present, must be a positive integer
    """
    result = ManifestValidation()

    for index, network in enumerate(networks):
        _check_name(index, network, result)
        _check_url(index, network, result)
        _check_compute_units(index, network, result)

    return result


# ---------------------------------------------------------------------------
# Cross-Record Constraints
# ---------------------------------------------------------------------------

def validate_cross_record_constraints(networks: Sequence[Network]) -> ManifestValidation:
    """Validate constraints spanning multiple networks.

    Checks:
    - names must be unique ignoring case (they derive the same identifiers)
    - urls should be unique (WARNING: two providers for one endpoint)

    Entries whose name or url is empty or not a string are skipped here;
    the field checks already report them.
    """
    result = ManifestValidation()

    seen_names: dict[str, int] = {}
    seen_urls: dict[str, int] = {}

    for index, network in enumerate(networks):
        name = _usable_name(network)
        if name:
            key = storage_identifier(name)
            if key in seen_names:
                first = seen_names[key]
                result.add(_violation(
                    Severity.ERROR, "duplicate_name",
                    f"Name collides with {networks[first].name!r} at "
                    f"networks[{first}] (both derive {key})",
                    index, network, "name",
                ))
            else:
                seen_names[key] = index

        url = network.url
        if isinstance(url, str) and url:
            if url in seen_urls:
                result.add(_violation(
                    Severity.WARNING, "duplicate_url",
                    f"Url {url!r} is also used by networks[{seen_urls[url]}]",
                    index, network, "url",
                ))
            else:
                seen_urls[url] = index

    return result


def validate_all(networks: Sequence[Network]) -> ManifestValidation:
    """Run all constraint checks and return the combined result."""
    result = ManifestValidation()
    result.extend(validate_field_constraints(networks))
    result.extend(validate_cross_record_constraints(networks))
    return result
