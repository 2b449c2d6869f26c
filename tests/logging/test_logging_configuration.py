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
"""Tests for configure_logging."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from roombroker.core.config import Config
from roombroker.logging.configuration import configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logging.getLogger("roombroker.sessions").setLevel(logging.NOTSET)
    logging.getLogger().setLevel(logging.WARNING)


def logging_config(**section: object) -> Config:
    return Config({"roombroker": {"logging": section}})


class TestLevels:
    def test_packaged_defaults(self):
        props = configure_logging(Config.defaults())
        assert props.format == "console"
        assert props.module_levels == {}
        assert logging.getLogger().level == logging.INFO

    def test_root_level(self):
        configure_logging(logging_config(level={"root": "debug"}))
        assert logging.getLogger().level == logging.DEBUG

    def test_per_logger_levels(self):
        props = configure_logging(logging_config(level={"root": "INFO", "roombroker.sessions": "debug"}))
        assert props.module_levels == {"roombroker.sessions": "DEBUG"}
        assert logging.getLogger("roombroker.sessions").level == logging.DEBUG

    def test_unknown_level_fails_fast(self):
        with pytest.raises(ValueError, match="LoggingProperties"):
            configure_logging(logging_config(level={"root": "LOUD"}))


class TestFormat:
    def test_console_renderer_by_default(self):
        configure_logging(Config({}))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self):
        configure_logging(logging_config(format="JSON"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.format_exc_info in processors

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ROOMBROKER_LOGGING_FORMAT", "json")
        assert configure_logging(Config.defaults()).format == "json"

    def test_unknown_format_fails_fast(self):
        with pytest.raises(ValueError, match="LoggingProperties"):
            configure_logging(logging_config(format="xml"))
