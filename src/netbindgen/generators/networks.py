"""Network provider bindings generator.

Produces a Rust module that declares one lazily-initialised provider per
network inside a single ``lazy_static!`` block, followed by one accessor
function per network:

    lazy_static! {
        static ref ETHEREUM_PROVIDER: ... = create_retry_client(...)...;
    }

    pub fn get_ethereum_provider() -> ... {
        ETHEREUM_PROVIDER.clone()
    }

The block must be closed before any function starts, so declarations and
accessors are emitted in two separate passes over the input.
"""

from __future__ import annotations

from collections.abc import Sequence

import jinja2

from netbindgen.derivations.naming import accessor_identifier, storage_identifier
from netbindgen.models.network import Network

PROVIDER_TYPE = "Arc<Provider<RetryClient<Http>>>"

_HEADER = """\
/// THIS IS A GENERATED FILE. DO NOT MODIFY MANUALLY.
///
/// This file was auto generated by netbindgen.
/// Any manual changes to this file will be overwritten.

use ethers::providers::{Provider, Http, RetryClient};
use rindexer_core::lazy_static;
use rindexer_core::provider::create_retry_client;
use std::sync::Arc;

lazy_static! {"""

_CONTAINER_CLOSE = "}"

_STORAGE_TEMPLATE = jinja2.Template(
    "    static ref {{ storage }}: {{ provider_type }} = "
    'create_retry_client("{{ url }}", {{ compute_units }})'
    '.expect("Error creating provider");'
)

_ACCESSOR_TEMPLATE = jinja2.Template("""\
pub fn {{ accessor }}() -> {{ provider_type }} {
    {{ storage }}.clone()
}
""")


def compute_units_literal(compute_units_per_second: int | None) -> str:
    """Render the rate-limit hint as a Rust Option literal.

    >>> compute_units_literal(660)
    'Some(660)'
    >>> compute_units_literal(None)
    'None'
    """
    if compute_units_per_second is None:
        return "None"
    return f"Some({compute_units_per_second})"


def render_storage_declaration(network: Network) -> str:
    """Render the lazy_static entry holding the network's shared provider."""
    return _STORAGE_TEMPLATE.render(
        storage=storage_identifier(network.name),
        provider_type=PROVIDER_TYPE,
        url=network.url,
        compute_units=compute_units_literal(network.compute_units_per_second),
    )


def render_accessor_function(network: Network) -> str:
    """Render the function returning a clone of the shared provider Arc."""
    return _ACCESSOR_TEMPLATE.render(
        accessor=accessor_identifier(network.name),
        provider_type=PROVIDER_TYPE,
        storage=storage_identifier(network.name),
    )


def generate_networks_code(networks: Sequence[Network]) -> str:
    """Generate the complete provider bindings module.

    Networks are emitted in input order with no reordering or
    deduplication. Duplicate names are not detected here; they surface as
    duplicate definitions when the output is compiled.
    """
    output: list[str] = [_HEADER]

    for network in networks:
        output.append(render_storage_declaration(network))

    output.append(_CONTAINER_CLOSE)

    for network in networks:
        output.append("")
        output.append(render_accessor_function(network))

    return "\n".join(output) + "\n"
