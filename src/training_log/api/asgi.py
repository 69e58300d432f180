"""ASGI entrypoint for the training log API."""

from training_log.api.app import create_app
from training_log.containers import build_container

app = create_app(build_container())
