"""Resource schemas carried by the generic BFF client."""

from platformkit.schemas.base import FeatureDataModel
from platformkit.schemas.comment import Comment
from platformkit.schemas.post import Post
from platformkit.schemas.user import Address
from platformkit.schemas.user import Company
from platformkit.schemas.user import Geo
from platformkit.schemas.user import User

__all__ = ["FeatureDataModel", "Post", "Comment", "User", "Address", "Company", "Geo"]
