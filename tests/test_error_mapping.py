from __future__ import annotations

import pytest

from propelauth_sdk.error_mapping import (
    DEFAULT_BAD_REQUEST_MESSAGE,
    error_table,
    flatten_reasons,
    index_by,
    map_transport_error,
    translate_errors,
)
from propelauth_sdk.errors import (
    BadRequestError,
    ConnectorError,
    InvalidApiKeyError,
    NotFoundError,
    ResponseError,
    UnexpectedError,
)
from propelauth_sdk.models.user import BadFetchUsersByQuery, UserMetadata

TABLE = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError},
    bad_request=BadRequestError,
    entity_type=BadFetchUsersByQuery,
)


@pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 429, 500, 502, 503])
@pytest.mark.parametrize("entity", [None, BadFetchUsersByQuery(page_size=["too big"]), {"raw": True}])
def test_every_status_and_body_maps_to_one_error(status, entity) -> None:
    default = UnexpectedError()

    result = map_transport_error(ResponseError(status, entity=entity), default, TABLE)

    assert isinstance(result, (BadRequestError, InvalidApiKeyError, NotFoundError, UnexpectedError))


def test_connector_failure_returns_default_without_classifying() -> None:
    calls: list[tuple[int, object]] = []

    def classify(status: int, entity: object) -> NotFoundError:
        calls.append((status, entity))
        return NotFoundError()

    default = UnexpectedError()
    result = map_transport_error(ConnectorError("connection refused"), default, classify)

    assert result is default
    assert calls == []


def test_structured_body_takes_precedence_over_status() -> None:
    body = BadFetchUsersByQuery(order_by=["unknown column"])

    result = map_transport_error(ResponseError(401, entity=body), UnexpectedError(), TABLE)

    assert isinstance(result, BadRequestError)
    assert result.details is body


def test_status_lookup_when_no_body() -> None:
    assert isinstance(map_transport_error(ResponseError(401), UnexpectedError(), TABLE), InvalidApiKeyError)
    assert isinstance(map_transport_error(ResponseError(404), UnexpectedError(), TABLE), NotFoundError)


def test_unmatched_status_falls_through_to_default() -> None:
    default = UnexpectedError()

    assert map_transport_error(ResponseError(418), default, TABLE) is default


def test_table_without_bad_request_rule_ignores_body() -> None:
    table = error_table({400: NotFoundError})
    body = BadFetchUsersByQuery(page_size=["bad"])

    assert isinstance(table(400, body), NotFoundError)
    assert table(500, body) is None


def test_table_builds_fresh_errors() -> None:
    assert TABLE(404, None) is not TABLE(404, None)


@pytest.mark.asyncio
async def test_translate_errors_chains_transport_failure() -> None:
    failure = ResponseError(404)

    async def binding() -> None:
        raise failure

    with pytest.raises(NotFoundError) as exc_info:
        await translate_errors(binding(), TABLE)

    assert exc_info.value.__cause__ is failure


@pytest.mark.asyncio
async def test_translate_errors_passes_through_success() -> None:
    async def binding() -> str:
        return "ok"

    assert await translate_errors(binding(), TABLE) == "ok"


def test_flatten_reasons_joins_with_comma() -> None:
    assert flatten_reasons(["field a invalid", "field b missing"]) == "field a invalid, field b missing"


def test_flatten_reasons_without_reasons() -> None:
    assert flatten_reasons(None) == DEFAULT_BAD_REQUEST_MESSAGE
    assert flatten_reasons([]) == DEFAULT_BAD_REQUEST_MESSAGE


def test_index_by_last_duplicate_wins() -> None:
    records = [{"k": "a", "v": 1}, {"k": "a", "v": 2}]

    assert index_by(records, lambda r: r["k"]) == {"a": {"k": "a", "v": 2}}


def test_index_by_drops_missing_keys() -> None:
    anonymous = UserMetadata(user_id="u1", email="anon@example.com")
    bob = UserMetadata(user_id="u2", email="bob@example.com", username="bob")

    result = index_by([anonymous, bob], lambda user: user.username)

    assert result == {"bob": bob}
    assert None not in result
