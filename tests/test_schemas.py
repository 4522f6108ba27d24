import json

import pytest
from bff_stub import make_comment
from bff_stub import make_post
from bff_stub import make_user
from pydantic import ValidationError

from platformkit.schemas import Comment
from platformkit.schemas import Post
from platformkit.schemas import User
from platformkit.schemas.base import is_resource_schema
from platformkit.schemas.base import require_resource_schema


class TestWireNames:
    def test_post_decodes_camel_case(self):
        post = Post.model_validate(make_post(3, user_id=2))

        assert post.user_id == 2
        assert post.resource_id == 3

    def test_post_encodes_camel_case(self):
        post = Post(id=1, user_id=1, title="Updated Title", body="Updated Body")

        assert json.loads(post.to_wire()) == {
            "id": 1,
            "userId": 1,
            "title": "Updated Title",
            "body": "Updated Body",
        }

    def test_user_round_trip_keeps_every_field(self):
        payload = make_user(1)

        user = User.model_validate_json(json.dumps(payload))
        decoded = json.loads(user.to_wire())

        assert decoded["company"]["catchPhrase"] == payload["company"]["catchPhrase"]
        assert decoded["address"]["geo"] == {"id": None, **payload["address"]["geo"]}
        assert User.model_validate(decoded) == user


class TestIdentifiers:
    def test_comment_id_is_optional(self):
        payload = make_comment(1)
        del payload["id"]

        comment = Comment.model_validate(payload)

        assert comment.resource_id is None

    def test_post_id_is_required(self):
        payload = make_post(1)
        del payload["id"]

        with pytest.raises(ValidationError):
            Post.model_validate(payload)


class TestSchemaCheck:
    @pytest.mark.parametrize("schema", [Post, User, Comment])
    def test_resource_schemas(self, schema):
        assert is_resource_schema(schema)
        require_resource_schema(schema)

    @pytest.mark.parametrize("schema", [dict, str, Post(id=1, user_id=1, title="t", body="b")])
    def test_other_types_rejected(self, schema):
        assert not is_resource_schema(schema)
        with pytest.raises(TypeError):
            require_resource_schema(schema)
