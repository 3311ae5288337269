"""ASGI entrypoint for the Nutri-AI API."""

from nutri_ai.api.app import create_app
from nutri_ai.containers import build_container

app = create_app(build_container())
