import logging

import pytest
import streamlit as st

from pubquality import config


@pytest.fixture
def no_secrets(monkeypatch):
    monkeypatch.setattr(st, "secrets", {})
    for name in (config.SOURCE_ENV, config.HTTP_TIMEOUT_ENV, config.LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


class TestSettingLookup:
    def test_default_source_points_at_bundled_csv(self, no_secrets):
        assert config.data_source() == str(config.DEFAULT_SOURCE)
        assert config.DEFAULT_SOURCE.name == "Deysa.csv"

    def test_secret_used_when_env_is_unset(self, no_secrets, monkeypatch):
        monkeypatch.setattr(st, "secrets", {config.SOURCE_ENV: "https://secrets.example/pubs.csv"})
        assert config.data_source() == "https://secrets.example/pubs.csv"

    def test_env_wins_over_secret(self, no_secrets, monkeypatch):
        monkeypatch.setattr(st, "secrets", {config.SOURCE_ENV: "https://secrets.example/pubs.csv"})
        monkeypatch.setenv(config.SOURCE_ENV, "https://example.com/pubs.csv")
        assert config.data_source() == "https://example.com/pubs.csv"

    def test_blank_secret_falls_back_to_default(self, no_secrets, monkeypatch):
        monkeypatch.setattr(st, "secrets", {config.SOURCE_ENV: "   "})
        assert config.data_source() == str(config.DEFAULT_SOURCE)


class TestHttpTimeout:
    def test_parsing(self, no_secrets, monkeypatch):
        monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, "2.5")
        assert config.http_timeout() == 2.5
        monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, "soon")
        assert config.http_timeout() == config.DEFAULT_HTTP_TIMEOUT

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "NaN"])
    def test_non_finite_values_use_default(self, no_secrets, monkeypatch, raw):
        monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, raw)
        assert config.http_timeout() == config.DEFAULT_HTTP_TIMEOUT

    def test_tiny_values_are_clamped(self, no_secrets, monkeypatch):
        monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, "0")
        assert config.http_timeout() == 0.1


def test_log_level(no_secrets, monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
    assert config.log_level() == logging.DEBUG
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
    assert config.log_level() == logging.INFO
