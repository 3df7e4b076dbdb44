from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

SUCCESS_FIELDS = (
    "latitude", "longitude",
    "street_number", "street_name", "street_name_short", "suburb",
    "council", "council_short", "state", "state_short",
    "country", "country_short", "post_code",
)
ERROR_FIELDS = ("error_code", "error_message")


class GeocodeResult(BaseModel):
    """
    Outcome of a single geocode call.

    `success` and `cacheable` are always set. A successful result carries the
    coordinates and address components, a failed one carries the error code and
    message, never both.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    success: bool
    cacheable: bool

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    street_name_short: Optional[str] = None
    suburb: Optional[str] = None
    council: Optional[str] = None
    council_short: Optional[str] = None
    state: Optional[str] = None
    state_short: Optional[str] = None
    country: Optional[str] = None
    country_short: Optional[str] = None
    post_code: Optional[str] = None

    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def check_field_groups(self):
        populated = SUCCESS_FIELDS if self.success else ERROR_FIELDS
        forbidden = ERROR_FIELDS if self.success else SUCCESS_FIELDS
        missing = [name for name in populated if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Missing fields for success={self.success}: {', '.join(missing)}")
        present = [name for name in forbidden if getattr(self, name) is not None]
        if present:
            raise ValueError(f"Unexpected fields for success={self.success}: {', '.join(present)}")
        return self

    @classmethod
    def failure(cls, error_code, error_message, cacheable):
        return cls(success=False, error_code=error_code, error_message=error_message, cacheable=cacheable)

    def to_dict(self):
        """Serialise with camelCase keys, leaving out the unused field group."""
        return self.model_dump(by_alias=True, exclude_none=True)
