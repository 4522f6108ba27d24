from __future__ import annotations

from platformkit.schemas.base import FeatureDataModel


class Post(FeatureDataModel):
    id: int
    user_id: int
    title: str
    body: str
