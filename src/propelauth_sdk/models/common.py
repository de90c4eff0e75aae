"""Shared model helpers for PropelAuth request validation payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BadRequestDetails(BaseModel):
    """Field-level reasons returned with an HTTP 400.

    Every field holds a list of human readable reasons. Subclasses declare the
    fields a given endpoint is known to report; unknown fields are kept as
    extras so no reason is lost.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def reasons(self) -> list[str]:
        """Return every reason across all fields, in declaration order."""

        collected: list[str] = []
        for _, value in self:
            if isinstance(value, list):
                collected.extend(str(item) for item in value)
            elif isinstance(value, str):
                collected.append(value)
        return collected


__all__ = ["BadRequestDetails"]
