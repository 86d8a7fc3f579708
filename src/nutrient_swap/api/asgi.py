"""ASGI entrypoint for the nutrient swap API."""

from nutrient_swap.api.app import create_app
from nutrient_swap.containers import build_container

app = create_app(build_container())
