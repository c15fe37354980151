"""ASGI entrypoint for the daily ledger API."""

from daily_ledger.api.app import create_app
from daily_ledger.containers import build_container

app = create_app(build_container())
