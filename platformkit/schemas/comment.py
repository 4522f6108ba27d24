from __future__ import annotations

from typing import Optional

from platformkit.schemas.base import FeatureDataModel


class Comment(FeatureDataModel):
    # Optional so new comments can be submitted before the server assigns one
    id: Optional[int] = None
    post_id: int
    name: str
    email: str
    body: str
