"""Translate transport failures into the SDK's domain errors.

Every facade call funnels its failures through :func:`map_transport_error`
with an operation specific classifier, usually built with
:func:`error_table`. Rules are evaluated top to bottom:

1. a decoded structured error body (whatever the status code),
2. the bare HTTP status code,
3. anything else falls through to the default error.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from .errors import ConnectorError, ResponseError, TransportError, UnexpectedError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Exception)
T = TypeVar("T")
K = TypeVar("K")

DEFAULT_BAD_REQUEST_MESSAGE = "Request is invalid"


def map_transport_error(
    failure: TransportError,
    default: E,
    classify: Callable[[int, Any], E | None],
) -> E:
    """Return the domain error for ``failure``.

    Connector failures never reach ``classify``: without a status code there is
    nothing to classify, so ``default`` is returned as is.
    """

    if isinstance(failure, ResponseError):
        mapped = classify(failure.status_code, failure.entity)
        if mapped is not None:
            return mapped
        logger.debug("Unclassified PropelAuth response: HTTP %s", failure.status_code)
        return default
    if not isinstance(failure, ConnectorError):
        logger.debug("Unknown transport failure type %s", type(failure).__name__)
    return default


def error_table(
    statuses: Mapping[int, Callable[[], E]],
    *,
    bad_request: Callable[[Any], E] | None = None,
    entity_type: type[BaseModel] = BaseModel,
) -> Callable[[int, Any], E | None]:
    """Build a classifier from a status table.

    ``bad_request`` receives the decoded error body and takes precedence over
    the status lookup; the remote side does not always pair a structured body
    with the same status code.
    """

    def classify(status_code: int, entity: Any) -> E | None:
        if bad_request is not None and isinstance(entity, entity_type):
            return bad_request(entity)
        factory = statuses.get(status_code)
        return factory() if factory is not None else None

    return classify


async def translate_errors(
    call: Awaitable[T],
    classify: Callable[[int, Any], Exception | None],
) -> T:
    """Await an endpoint binding and re-raise its failures as domain errors."""

    try:
        return await call
    except TransportError as exc:
        raise map_transport_error(exc, UnexpectedError(), classify) from exc


def flatten_reasons(reasons: Iterable[str] | None) -> str:
    """Join validation reasons into one readable message."""

    if reasons is None:
        return DEFAULT_BAD_REQUEST_MESSAGE
    joined = ", ".join(reasons)
    return joined or DEFAULT_BAD_REQUEST_MESSAGE


def index_by(records: Iterable[T], key: Callable[[T], K | None]) -> dict[K, T]:
    """Fold ``records`` into a mapping; missing keys are skipped, later duplicates win."""

    indexed: dict[K, T] = {}
    for record in records:
        record_key = key(record)
        if record_key is None:
            continue
        indexed[record_key] = record
    return indexed


__all__ = [
    "DEFAULT_BAD_REQUEST_MESSAGE",
    "error_table",
    "flatten_reasons",
    "index_by",
    "map_transport_error",
    "translate_errors",
]
