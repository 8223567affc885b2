"""Shared test fixtures for BizBuz profile and card tests."""

from __future__ import annotations

import pytest

from bizbuz.profiles import Profile, SocialLinks, demo_profile


@pytest.fixture()
def full_profile() -> Profile:
    """Profile with every field populated, including all social handles."""
    return Profile(
        name="Grace Brewster Hopper",
        title="Rear Admiral",
        company="US Navy",
        email="grace@example.com",
        phone="+1 555 0100",
        website="https://example.com/grace",
        location="Arlington",
        bio="It's easier to ask forgiveness than it is to get permission.",
        social=SocialLinks(github="ghopper", twitter="amazinggrace", linkedin="grace-hopper"),
    )


@pytest.fixture()
def name_only_profile() -> Profile:
    return Profile(name="Ada Lovelace")


@pytest.fixture()
def ada() -> Profile:
    """The built-in demo profile."""
    return demo_profile()
