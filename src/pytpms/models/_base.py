"""Base model for pytpms records.

Every model inherits from :class:`TpmsBaseModel` which provides:

* ``alias_generator=to_camel`` so payloads may use camelCase keys
  (``tireIndex``) as well as snake_case field names.
* :meth:`to_payload` for a compact, JSON-ready camelCase dict.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TpmsBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the model as a camelCase dict without absent values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
