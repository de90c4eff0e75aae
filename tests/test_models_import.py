"""Smoke tests for the public ``propelauth_sdk.models`` namespace."""


def test_models_exports_are_available() -> None:
    import propelauth_sdk.models as models

    assert models.UserMetadata is not None
    assert models.FetchOrgResponse is not None
    assert models.ValidateApiKeyResponse is not None
    assert models.BadRequestDetails is not None
    for name in models.__all__:
        assert hasattr(models, name), name


def test_unknown_response_fields_are_kept() -> None:
    from propelauth_sdk.models import UserMetadata

    user = UserMetadata.model_validate(
        {"user_id": "u1", "email": "ada@example.com", "new_server_field": 1}
    )

    assert user.model_extra == {"new_server_field": 1}
