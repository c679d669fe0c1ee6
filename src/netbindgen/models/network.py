"""Network descriptor model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    """One remote endpoint the generated code connects to.

    Attributes:
        name: Identifying name (e.g. 'ethereum'). Expected to be unique
            across a manifest, ignoring case.
        url: RPC endpoint, copied verbatim into generated code.
        compute_units_per_second: Optional rate-limit hint. None means
            the runtime client applies its own default.
    """

    name: str
    url: str
    compute_units_per_second: int | None = None

    @property
    def has_compute_units(self) -> bool:
        return self.compute_units_per_second is not None

    def __str__(self) -> str:
        return f"{self.name} ({self.url})"
