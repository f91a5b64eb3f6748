"""Tests for the declarative identity mapper and the profile document."""

import pytest
from pydantic import ValidationError

from socialgate.core.document import ProfileDocument
from socialgate.core.errors import MalformedResponse
from socialgate.core.mapper import FieldRule, IdentityMapper, display_fields
from socialgate.core.schemas import Identity

AVATAR = "https://example.com/avatar.gif"


class TestIdentityMapper:
    def _mapper(self) -> IdentityMapper:
        return IdentityMapper(id_path="id", fields=display_fields("displayName", "image.url"))

    def test_maps_profile(self):
        document = ProfileDocument({"displayName": "octocat", "id": "1", "image": {"url": AVATAR}})

        identity = self._mapper().map(document, "google")

        assert identity.urn == "urn:google:1"
        assert identity.properties == {"name": "octocat", "picture": AVATAR}
        assert identity.provider == "google"
        assert identity.native_id == "1"

    def test_missing_name_uses_default(self):
        identity = self._mapper().map(ProfileDocument({"id": "1", "image": {"url": AVATAR}}), "google")
        assert identity.properties == {"name": "unknown", "picture": AVATAR}

    def test_null_name_uses_default(self):
        identity = self._mapper().map(ProfileDocument({"id": "1", "displayName": None}), "google")
        assert identity.properties["name"] == "unknown"

    def test_missing_picture_is_omitted(self):
        identity = self._mapper().map(ProfileDocument({"id": "1", "displayName": "octocat"}), "google")
        assert identity.properties == {"name": "octocat"}

    def test_missing_id_fails(self):
        with pytest.raises(MalformedResponse) as exc_info:
            self._mapper().map(ProfileDocument({"displayName": "octocat"}), "google")
        assert exc_info.value.field == "id"

    def test_empty_id_fails(self):
        with pytest.raises(MalformedResponse):
            self._mapper().map(ProfileDocument({"id": ""}), "google")

    def test_numeric_id_is_stringified(self):
        identity = self._mapper().map(ProfileDocument({"id": 583231}), "github")
        assert identity.urn == "urn:github:583231"

    def test_object_id_fails(self):
        with pytest.raises(MalformedResponse, match="not a scalar"):
            self._mapper().map(ProfileDocument({"id": {"value": "1"}}), "google")

    def test_nested_id_path(self):
        mapper = IdentityMapper(id_path=("data", "user", "id"))
        identity = mapper.map(ProfileDocument({"data": {"user": {"id": "u-9"}}}), "acme")
        assert identity.urn == "urn:acme:u-9"
        assert identity.properties == {}

    def test_required_field(self):
        mapper = IdentityMapper(fields=(FieldRule("email", "email", required=True),))

        with pytest.raises(MalformedResponse) as exc_info:
            mapper.map(ProfileDocument({"id": "1"}), "acme")

        assert exc_info.value.field == "email"

    def test_extra_rules_and_list_indices(self):
        mapper = IdentityMapper(fields=display_fields(
            "name", "avatar",
            FieldRule("email", ("emails", 0, "value")),
            FieldRule("verified", "verified"),
        ))
        document = ProfileDocument({
            "id": "1",
            "emails": [{"value": "a@b.com"}],
            "verified": True,
        })

        identity = mapper.map(document, "acme")

        assert identity.properties == {"name": "unknown", "email": "a@b.com", "verified": "true"}


class TestProfileDocument:
    def test_dotted_and_sequence_paths(self):
        document = ProfileDocument({"image": {"url": AVATAR}, "tags": ["a", "b"]})

        assert document.get("image.url") == AVATAR
        assert document.get(("image", "url")) == AVATAR
        assert document.get(("tags", 1)) == "b"
        assert document.get("tags.0") == "a"

    def test_absent_paths_return_default(self):
        document = ProfileDocument({"image": {"url": AVATAR}, "tags": ["a"], "n": 1})

        assert document.get("missing") is None
        assert document.get("image.size", "x") == "x"
        assert document.get(("tags", 5)) is None
        assert document.get("tags.first") is None
        assert document.get("n.deeper") is None

    def test_is_read_only(self):
        document = ProfileDocument({"image": {"url": AVATAR}, "tags": ["a"]})

        with pytest.raises(TypeError):
            document["image"]["url"] = "other"
        assert isinstance(document["tags"], tuple)

    def test_copy_is_detached(self):
        source = {"image": {"url": AVATAR}}
        document = ProfileDocument(source)
        source["image"]["url"] = "changed"

        copy = document.to_dict()
        copy["image"]["url"] = "mutated"

        assert document.get("image.url") == AVATAR
        assert copy == {"image": {"url": "mutated"}}

    def test_mapping_protocol(self):
        document = ProfileDocument({"id": "1", "name": "n"})
        assert len(document) == 2
        assert set(document) == {"id", "name"}
        assert "id" in document

    def test_rejects_non_objects(self):
        with pytest.raises(TypeError):
            ProfileDocument(["id"])


class TestIdentity:
    def test_rejects_bad_urn(self):
        with pytest.raises(ValidationError):
            Identity(urn="google:1")
        with pytest.raises(ValidationError):
            Identity(urn="urn:google:")
        with pytest.raises(ValidationError):
            Identity(urn="")

    def test_frozen(self):
        identity = Identity.build("google", "1", {"name": "octocat"})
        with pytest.raises(ValidationError):
            identity.urn = "urn:google:2"

    def test_serializes(self):
        identity = Identity.build("google", "1", {"name": "octocat"})
        assert identity.model_dump() == {"urn": "urn:google:1", "properties": {"name": "octocat"}}
