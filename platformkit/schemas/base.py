"""Base model every BFF resource schema derives from.

A resource schema must be encodable to and decodable from JSON and expose its
identifier.  Subclassing :class:`FeatureDataModel` gives both: pydantic handles
the wire codec, and ``resource_id`` reads the identifier field.
"""

from __future__ import annotations

from typing import Optional
from typing import Type

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """JSON model using camelCase names on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> bytes:
        """Encode to the JSON body sent to the BFF."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


class FeatureDataModel(WireModel):
    """A record the resource client can fetch, update and delete."""

    id: Optional[int] = None

    @property
    def resource_id(self) -> Optional[int]:
        return self.id


def is_resource_schema(schema: object) -> bool:
    """Return True when *schema* is a :class:`FeatureDataModel` subclass."""

    return isinstance(schema, type) and issubclass(schema, FeatureDataModel)


def require_resource_schema(schema: Type[FeatureDataModel]) -> None:
    if not is_resource_schema(schema):
        raise TypeError(f"{schema!r} is not a FeatureDataModel subclass")
