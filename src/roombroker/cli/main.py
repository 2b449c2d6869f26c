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
"""roombroker CLI — run the HTTP service."""

from __future__ import annotations

from pathlib import Path

import click
import uvicorn

from roombroker.bootstrap import create_application
from roombroker.core.config import Config
from roombroker.core.properties import ServerProperties
from roombroker.logging.configuration import configure_logging


@click.group()
@click.version_option(package_name="roombroker")
def cli() -> None:
    """roombroker — shared room sessions and captions for video meetings."""


@click.command()
@click.option(
    "--config",
    "config_path",
    default="roombroker.yaml",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (YAML or TOML).",
)
@click.option("--profile", "profiles", multiple=True, help="Active profile overlay; may be repeated.")
@click.option("--host", default=None, help="Bind address (default: from config).")
@click.option("--port", default=None, type=int, help="Port number (default: from config).")
def serve_command(config_path: Path, profiles: tuple[str, ...], host: str | None, port: int | None) -> None:
    """Start the HTTP service."""
    config = Config.from_file(config_path, active_profiles=list(profiles))
    configure_logging(config)
    server = config.bind(ServerProperties)

    app = create_application(config)
    uvicorn.run(app, host=host or server.host, port=port or server.port, log_level="warning")


cli.add_command(serve_command, name="serve")
