"""User resource and its nested value objects."""

from __future__ import annotations

from typing import Optional

from platformkit.schemas.base import FeatureDataModel
from platformkit.schemas.base import WireModel


class Geo(WireModel):
    id: Optional[int] = None
    lat: str
    lng: str


class Address(WireModel):
    id: Optional[int] = None
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(WireModel):
    id: Optional[int] = None
    name: str
    catch_phrase: str
    bs: str


class User(FeatureDataModel):
    id: int
    name: str
    username: str
    address: Address
    phone: str
    website: str
    company: Company
