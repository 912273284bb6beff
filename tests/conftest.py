"""Shared fixtures for wp_env tests."""

import pytest

from wp_env import Environment, PlatformInfo, ProcessEnvironment

from .fakes import CountingConstants, FakeFileProbe


@pytest.fixture
def constants():
    return CountingConstants()


@pytest.fixture
def environ():
    return {}


@pytest.fixture
def files():
    return FakeFileProbe()


@pytest.fixture
def server():
    return {}


@pytest.fixture
def env(constants, environ, files, server):
    """Environment isolated from the real process, files and .env."""
    return Environment(
        constants=constants,
        process=ProcessEnvironment(environ),
        files=files,
        platform=PlatformInfo(sapi="cli", version="3.12.1", server=server),
    )
