"""Unit tests for profile entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from profilehub.core.database.entities.profiles import Profile, ProfileBase


class TestProfileBase:
    def test_valid_profile(self, sample_profile_data):
        profile = ProfileBase(**sample_profile_data)
        assert profile.is_favorite is False
        assert profile.is_archived is False
        assert profile.profile_pic_url is None

    def test_special_id_min_length(self, sample_profile_data):
        with pytest.raises(ValidationError):
            ProfileBase(**{**sample_profile_data, "special_id": "S"})

    def test_email_must_be_valid(self, sample_profile_data):
        with pytest.raises(ValidationError):
            ProfileBase(**{**sample_profile_data, "email": "grace"})


class TestProfile:
    def test_table_defaults(self, sample_profile_data):
        profile = Profile(**sample_profile_data)
        assert profile.id is None
        assert profile.created_at is not None
        assert profile.updated_at is not None
        assert profile.full_name == "Grace Hopper"
        assert "EMP-42" in repr(profile)

    def test_table_name(self):
        assert Profile.__tablename__ == "profiles"
