"""Geocoder capability interface and address normalisation."""
from __future__ import annotations

import re
from typing import Protocol, Sequence, Union

from geocoding_service.models.geocode_result import GeocodeResult

Address = Union[str, Sequence[str]]

_NEWLINES = re.compile(r"\n+")


class Geocoder(Protocol):
    def is_over_limit(self) -> bool: ...

    def geocode(self, address: Address) -> GeocodeResult: ...


def normalize_address(address: Address) -> str:
    """Join address components with ", " and fold line breaks into the same separator."""
    if not isinstance(address, str):
        address = ", ".join(address)
    return _NEWLINES.sub(", ", address).strip()
