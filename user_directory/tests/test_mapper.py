"""Tests for response mapping."""

import pytest

from user_directory.services.mapper import map_many, map_one


class TestMapOne:
    """Test single object mapping."""

    def test_valid_object(self):
        """Test mapping an object with all fields."""
        user = map_one({
            "id": 7,
            "first_name": "Michael",
            "last_name": "Lawson",
            "email": "michael.lawson@email.com",
            "job": "Engineer"
        })

        assert user is not None
        assert user.id == 7
        assert user.full_name == "Michael Lawson"
        assert user.email == "michael.lawson@email.com"
        assert user.job == "Engineer"

    def test_optional_fields_default_to_empty(self):
        """Test missing email and job become empty strings."""
        user = map_one({"id": 7, "first_name": "Michael", "last_name": "Lawson"})

        assert user.email == ""
        assert user.job == ""

    @pytest.mark.parametrize("missing", ["id", "first_name", "last_name"])
    def test_missing_required_field(self, missing):
        """Test objects without a required field are rejected."""
        data = {"id": 7, "first_name": "Michael", "last_name": "Lawson"}
        del data[missing]

        assert map_one(data) is None

    def test_null_required_field(self):
        """Test null required values count as missing."""
        assert map_one({"id": 7, "first_name": None, "last_name": "Lawson"}) is None

    def test_wrong_shape_rejected(self):
        """Test required fields of the wrong type are treated as malformed."""
        assert map_one({"id": "abc", "first_name": "Michael", "last_name": "Lawson"}) is None
        assert map_one({"id": 7, "first_name": ["Michael"], "last_name": "Lawson"}) is None
        assert map_one({"id": True, "first_name": "Michael", "last_name": "Lawson"}) is None

    def test_integer_like_id_accepted(self):
        """Test numeric strings are coerced to integer IDs."""
        user = map_one({"id": "7", "first_name": "Michael", "last_name": "Lawson"})

        assert user.id == 7

    def test_non_mapping(self):
        """Test non-dict input yields None."""
        assert map_one(None) is None
        assert map_one(["id", 7]) is None


class TestMapMany:
    """Test list mapping."""

    def test_drops_malformed_and_keeps_order(self):
        """Test malformed items are dropped and order is preserved."""
        raw = [
            {"id": 1, "first_name": "George", "last_name": "Bluth"},
            {"id": 2, "first_name": "Janet"},
            {"id": 3, "first_name": "Emma", "last_name": "Wong"},
            "not an object",
            {"id": 4, "first_name": "Eve", "last_name": "Holt"}
        ]

        users = map_many(raw)

        assert [user.id for user in users] == [1, 3, 4]

    def test_empty_list(self):
        """Test empty input yields an empty list."""
        assert map_many([]) == []

    def test_non_list(self):
        """Test non-list input yields an empty list."""
        assert map_many({"id": 1}) == []
        assert map_many(None) == []
