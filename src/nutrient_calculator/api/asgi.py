"""ASGI entrypoint for the nutrient calculator API."""

from nutrient_calculator.api.app import create_app
from nutrient_calculator.containers import build_container

app = create_app(build_container())
