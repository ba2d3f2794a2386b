"""Fixtures for graphql_combine tests"""

from pathlib import Path

import pytest

__all__ = ["fixture_path", "user_sdl"]


def fixture_path(name):
    return (Path(__file__).parent / name).with_suffix(".graphql")


def read_graphql(name):
    with fixture_path(name).open(encoding="utf-8") as file:
        return file.read()


@pytest.fixture(scope="module")
def user_sdl():
    return read_graphql("user")
