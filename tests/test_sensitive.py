"""Tests for sensitive key classification."""

import pytest

from wp_env import HookRegistry, HookType
from wp_env.constants import DEFAULT_SENSITIVE_KEYS
from wp_env.sensitive import SensitiveKeyClassifier


@pytest.fixture
def classifier():
    return SensitiveKeyClassifier(HookRegistry())


@pytest.mark.parametrize("key", ["DB_PASSWORD", "NONCE_SALT", "TOKEN"])
def test_exact_match(classifier, key):
    assert classifier.is_sensitive(key)


@pytest.mark.parametrize("key", ["GITHUB_TOKEN", "mail_password", "Stripe_Api_Key_Live"])
def test_substring_match_is_case_insensitive(classifier, key):
    assert classifier.is_sensitive(key)


def test_substring_match_is_one_directional(classifier):
    # "PASS" is contained in "PASSWORD", not the other way round
    assert not classifier.is_sensitive("PASS")
    assert not classifier.is_sensitive("DB_HOST")


def test_add_key(classifier):
    assert not classifier.is_sensitive("CUSTOM_SECRET")

    classifier.add_key("CUSTOM_SECRET")

    assert classifier.is_sensitive("CUSTOM_SECRET")
    assert classifier.is_sensitive("MY_CUSTOM_SECRET_V2")


def test_add_keys_is_idempotent(classifier):
    classifier.add_keys(["API_SECRET", "PRIVATE_TOKEN", "API_SECRET"])
    classifier.add_key("DB_PASSWORD")

    keys = classifier.keys
    assert keys.count("API_SECRET") == 1
    assert keys.count("DB_PASSWORD") == 1
    assert len(keys) == len(DEFAULT_SENSITIVE_KEYS) + 2


def test_hook_extends_policy(classifier):
    classifier.hooks.add_filter(
        HookType.SENSITIVE_KEY_CHECK, lambda flag, key: flag or key.startswith("STRIPE_")
    )

    assert classifier.is_sensitive("STRIPE_WEBHOOK")
    assert not classifier.is_sensitive("SITE_NAME")


def test_hook_starts_from_false(classifier):
    seen = []

    def capture(flag, key):
        seen.append((flag, key))
        return flag

    classifier.hooks.add_filter(HookType.SENSITIVE_KEY_CHECK, capture)
    classifier.is_sensitive("SITE_NAME")
    classifier.is_sensitive("DB_PASSWORD")

    # Listed keys are decided before the hook runs
    assert seen == [(False, "SITE_NAME")]


def test_environment_add_sensitive_keys(env, constants):
    env.add_sensitive_key("CUSTOM_SECRET")
    env.add_sensitive_keys(["API_SECRET", "PRIVATE_TOKEN"])
    constants.define("CUSTOM_SECRET", "very_secret")
    constants.define("API_SECRET", "shh")

    assert env.get("CUSTOM_SECRET") == "very_secret"
    assert env.get("API_SECRET") == "shh"
    assert len(env.cache.values) == 0
