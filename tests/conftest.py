"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from pydantic import BaseModel

from dirtyproxy import BuilderSettings


@pytest.fixture(scope="session", autouse=True)
def isolated_session_env(tmp_path_factory):
    """Run every test without DIRTYPROXY_* variables or a developer .env file.

    Session-scoped so hypothesis tests can share it.
    """
    patch = pytest.MonkeyPatch()
    for name in list(os.environ):
        if name.startswith("DIRTYPROXY_"):
            patch.delenv(name)
    patch.chdir(tmp_path_factory.mktemp("session-cwd"))
    yield
    patch.undo()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Keep DIRTYPROXY_* variables and stray .env files out of a test."""
    for name in list(os.environ):
        if name.startswith("DIRTYPROXY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    """Default builder settings, independent of the environment."""
    return BuilderSettings()


@dataclass
class FixtureAddress:
    city: str
    zip_code: str | None = None


@dataclass
class FixtureUser:
    name: str
    address: FixtureAddress
    tags: list[str] = field(default_factory=list)


class FixtureConfig(BaseModel):
    should_work: bool
    optional: str | None = None
    complex: dict[str, int] = {}


@pytest.fixture
def user_cls():
    return FixtureUser


@pytest.fixture
def address_cls():
    return FixtureAddress


@pytest.fixture
def config_cls():
    return FixtureConfig
