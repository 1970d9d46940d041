"""Correlation IDs tagging the log lines of one outbound API call.

The ID is never sent to the server; it only ties together the DEBUG/INFO
records a single ``GET`` produces.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("ramaris_request_id", default="")


def get_request_id() -> str:
    return request_id_var.get()


@contextmanager
def request_scope() -> Iterator[str]:
    """Bind a fresh short ID for the duration of one API call."""
    token = request_id_var.set(uuid.uuid4().hex[:12])
    try:
        yield request_id_var.get()
    finally:
        request_id_var.reset(token)
