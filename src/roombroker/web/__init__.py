"""roombroker web — Starlette routes, error mapping and app factory."""

from roombroker.web.app import create_app

__all__ = ["create_app"]
