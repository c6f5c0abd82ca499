import dataclasses

import pytest

from mws.profile import Profile


def test_to_dict_holds_user_and_project_only():
    profile = Profile(name="test", user="example", project="new-project")
    assert profile.to_dict() == {"user": "example", "project": "new-project"}


def test_from_dict_takes_name_from_argument():
    profile = Profile.from_dict("my-profile", {"user": "test-user", "project": "test-proj"})
    assert profile == Profile(name="my-profile", user="test-user", project="test-proj")


@pytest.mark.parametrize(
    "profile",
    [
        Profile(name="profile1", user="user1", project="project1"),
        Profile(name="empty"),
        Profile(name="юникод", user="пользователь", project="проект"),
    ],
)
def test_round_trip(profile):
    assert Profile.from_dict(profile.name, profile.to_dict()) == profile


def test_from_dict_missing_keys_become_empty():
    profile = Profile.from_dict("bare", {})
    assert profile.user == ""
    assert profile.project == ""


def test_from_dict_null_values_become_empty():
    profile = Profile.from_dict("nulls", {"user": None, "project": None})
    assert (profile.user, profile.project) == ("", "")


def test_from_dict_ignores_unknown_keys():
    profile = Profile.from_dict("extra", {"user": "u", "project": "p", "other": "x"})
    assert profile == Profile(name="extra", user="u", project="p")


def test_defaults_are_empty_strings():
    assert Profile() == Profile(name="", user="", project="")


def test_profile_is_immutable():
    profile = Profile(name="n", user="u", project="p")
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.user = "other"
    assert profile == Profile(name="n", user="u", project="p")
    assert profile.to_dict() == {"user": "u", "project": "p"}