"""
tests/test_app.py
"""
from __future__ import annotations

import pytest

from blog import create_app
from blog.config import DevConfig, ProdConfig, TestConfig


def test_production_refuses_missing_secret_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(ProdConfig, "SECRET_KEY", "")
    with pytest.raises(RuntimeError, match="SECRET_KEY is not set"):
        create_app("blog.config.ProdConfig")


def test_production_refuses_weak_secret_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(ProdConfig, "SECRET_KEY", "short")
    with pytest.raises(RuntimeError, match="too weak"):
        create_app("blog.config.ProdConfig")


def test_dev_and_test_configs_always_have_a_key():
    assert len(DevConfig.SECRET_KEY) >= 32
    assert len(TestConfig.SECRET_KEY) >= 32
