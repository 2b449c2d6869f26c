# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for Config loading, env overrides and property binding."""

from __future__ import annotations

from pathlib import Path

import pytest

from roombroker.core.config import Config
from roombroker.core.properties import FOUR_HOURS, ServerProperties, StorageProperties


class TestConfigGet:
    def test_dot_notation(self) -> None:
        config = Config({"roombroker": {"storage": {"backend": "redis"}}})
        assert config.get("roombroker.storage.backend") == "redis"

    def test_missing_key_returns_default(self) -> None:
        assert Config({}).get("roombroker.storage.backend", "memory") == "memory"

    def test_env_var_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROOMBROKER_STORAGE_BACKEND", "redis")
        config = Config({"roombroker": {"storage": {"backend": "memory"}}})
        assert config.get("roombroker.storage.backend") == "redis"

    def test_placeholder_from_env_with_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = Config({"roombroker": {"storage": {"redis_url": "${TEST_REDIS_URL:redis://fallback:6379/0}"}}})
        monkeypatch.delenv("TEST_REDIS_URL", raising=False)
        assert config.get("roombroker.storage.redis_url") == "redis://fallback:6379/0"
        monkeypatch.setenv("TEST_REDIS_URL", "redis://cache:6379/1")
        assert config.get("roombroker.storage.redis_url") == "redis://cache:6379/1"

    def test_placeholder_from_other_key(self) -> None:
        config = Config({"base": {"host": "cache"}, "roombroker": {"storage": {"redis_url": "redis://${base.host}:6379"}}})
        assert config.get("roombroker.storage.redis_url") == "redis://cache:6379"

    def test_unresolvable_placeholder_raises(self) -> None:
        config = Config({"a": "${DEFINITELY_NOT_SET_ANYWHERE_42}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("a")

    def test_get_section(self) -> None:
        config = Config({"roombroker": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("roombroker.logging.level") == {"root": "DEBUG"}
        assert config.get_section("roombroker.missing") == {}


class TestConfigSources:
    def test_defaults(self) -> None:
        config = Config.defaults()
        assert config.get("roombroker.storage.backend") == "memory"
        assert config.get("roombroker.storage.ttl-seconds") == 14400

    def test_from_file_overrides_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "roombroker.yaml"
        path.write_text("roombroker:\n  storage:\n    backend: redis\n")
        config = Config.from_file(path)
        assert config.get("roombroker.storage.backend") == "redis"
        assert config.get("roombroker.storage.ttl-seconds") == 14400
        assert str(path) in config.loaded_sources

    def test_profile_overlay(self, tmp_path: Path) -> None:
        (tmp_path / "roombroker.yaml").write_text("roombroker:\n  server:\n    port: 4000\n")
        (tmp_path / "roombroker-prod.yaml").write_text("roombroker:\n  server:\n    port: 443\n")
        config = Config.from_file(tmp_path / "roombroker.yaml", active_profiles=["prod"])
        assert config.get("roombroker.server.port") == 443

    def test_toml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "roombroker.toml"
        path.write_text('[roombroker.storage]\nkey_prefix = "vera"\n')
        assert Config.from_file(path).get("roombroker.storage.key_prefix") == "vera"

    def test_merge_treats_hyphen_and_underscore_as_one_key(self, tmp_path: Path) -> None:
        path = tmp_path / "roombroker.yaml"
        path.write_text("roombroker:\n  storage:\n    key_prefix: vera\n")
        storage = Config.from_file(path).get_section("roombroker.storage")
        assert storage["key_prefix"] == "vera"
        assert "key-prefix" not in storage

    def test_missing_file_keeps_defaults(self, tmp_path: Path) -> None:
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("roombroker.server.port") == 3345


class TestBind:
    def test_storage_defaults(self) -> None:
        props = Config({}).bind(StorageProperties)
        assert props.backend == "memory"
        assert props.ttl == FOUR_HOURS

    def test_storage_values(self) -> None:
        config = Config({"roombroker": {"storage": {"backend": "redis", "ttl_seconds": 60}}})
        props = config.bind(StorageProperties)
        assert props.backend == "redis"
        assert props.ttl.total_seconds() == 60

    def test_kebab_case_keys_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "roombroker.yaml"
        path.write_text(
            "roombroker:\n"
            "  storage:\n"
            "    backend: redis\n"
            "    redis-url: redis://cache:6379/3\n"
            "    ttl-seconds: 90\n"
            "    key-prefix: vera\n"
        )
        props = Config.from_file(path).bind(StorageProperties)
        assert props.redis_url == "redis://cache:6379/3"
        assert props.ttl.total_seconds() == 90
        assert props.key_prefix == "vera"

    def test_snake_case_file_overrides_kebab_case_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "roombroker.yaml"
        path.write_text("roombroker:\n  storage:\n    ttl_seconds: 60\n")
        assert Config.from_file(path).bind(StorageProperties).ttl_seconds == 60

    def test_kebab_case_wins_within_one_section(self) -> None:
        config = Config({"roombroker": {"storage": {"key_prefix": "old", "key-prefix": "new"}}})
        assert config.bind(StorageProperties).key_prefix == "new"

    def test_env_override_of_kebab_case_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROOMBROKER_STORAGE_REDIS_URL", "redis://env:6379/0")
        assert Config.defaults().bind(StorageProperties).redis_url == "redis://env:6379/0"

    def test_env_override_is_coerced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROOMBROKER_SERVER_PORT", "9000")
        assert Config({}).bind(ServerProperties).port == 9000

    def test_invalid_backend_fails_fast(self) -> None:
        config = Config({"roombroker": {"storage": {"backend": "etcd"}}})
        with pytest.raises(ValueError, match="StorageProperties"):
            config.bind(StorageProperties)

    def test_undecorated_model_rejected(self) -> None:
        from pydantic import BaseModel

        class Plain(BaseModel):
            value: str = "x"

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
