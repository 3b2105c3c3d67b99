"""ASGI entrypoint for the leftover chef API."""

from leftover_chef.api.app import create_app
from leftover_chef.containers import build_container

app = create_app(build_container())
