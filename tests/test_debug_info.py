"""Tests for debug info and host flags."""

from wp_env import Environment, MappingConstants, PlatformInfo, ProcessEnvironment

from .fakes import CountingDotenv, FakeFileProbe

DEBUG_INFO_KEYS = {
    "environment",
    "is_development",
    "is_staging",
    "is_production",
    "is_debug",
    "is_multisite",
    "is_docker",
    "is_container",
    "is_cli",
    "server_software",
    "sapi",
    "python_version",
    "host_version",
    "cache_count",
    "computed_cache_count",
    "has_dotenv",
}


def test_debug_info_shape(env):
    info = env.get_debug_info()

    assert set(info) == DEBUG_INFO_KEYS
    assert info["python_version"] == "3.12.1"
    assert info["host_version"] == "unknown"
    assert info["has_dotenv"] is False
    assert info["sapi"] == "cli"
    assert info["is_cli"] is True
    assert info["server_software"] == "unknown"


def test_debug_info_values(files, server):
    files.add("/.dockerenv")
    server["SERVER_SOFTWARE"] = "nginx/1.25.3"
    env = Environment(
        constants=MappingConstants({"WP_ENV": "staging", "WP_DEBUG": "1"}),
        dotenv=CountingDotenv(),
        process=ProcessEnvironment({}),
        files=files,
        platform=PlatformInfo(sapi="wsgi", version="3.11.0", server=server),
        host_info=lambda: "6.4",
    )

    info = env.get_debug_info()

    assert info["environment"] == "staging"
    assert info["is_staging"] is True
    assert info["is_production"] is False
    assert info["is_debug"] is True
    assert info["is_docker"] is True
    assert info["is_container"] is True
    assert info["is_cli"] is False
    assert info["server_software"] == "nginx"
    assert info["host_version"] == "6.4"
    assert info["has_dotenv"] is True
    assert info["computed_cache_count"] == 3
    assert info["cache_count"] > 0


def test_multisite(env, constants, environ):
    assert env.is_multisite() is False

    environ["MULTISITE"] = "yes"
    env.clear_cache()
    assert env.is_multisite() is True


def test_multisite_constant(env, constants):
    constants.define("MULTISITE", 1)

    assert env.is_multisite() is True


def test_is_debug(env, environ):
    environ["WP_DEBUG"] = "On"

    assert env.is_debug() is True


def test_fake_file_probe_is_isolated():
    env = Environment(process=ProcessEnvironment({}), files=FakeFileProbe())

    assert env.is_docker() is False
