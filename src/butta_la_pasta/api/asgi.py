"""ASGI entrypoint for the pasta API."""

from butta_la_pasta.api.app import create_app
from butta_la_pasta.containers import build_container

app = create_app(build_container())
