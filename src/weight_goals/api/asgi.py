"""ASGI entrypoint for the weight goals API."""

from weight_goals.api.app import create_app
from weight_goals.containers import build_container

app = create_app(build_container())
