"""The envelope returned by every CountryService method.

A failed operation is still a normal return value: ``ok`` is False and
``error`` carries one of the :data:`ErrorCode` values plus the message the
domain would print.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

ErrorCode = Literal["NOT_FOUND", "SAME_CITY", "CAPACITY_EXCEEDED", "EMPTY_COUNTRY"]


class ServiceError(BaseModel):
    """Why an operation failed; *detail* names the offending input."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: True when the operation went through.
        op: Operation name, used to pick a renderer (e.g. ``"unify_cities"``).
        data: A city payload (``name``, ``center``, ...), a list of them under
            ``items``, or a scalar answer such as ``residents``.
        warnings: Clamps the caller should hear about.
        error: Set only when ``ok`` is False.
        meta: Country name and city count after the operation.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def city_names(self) -> list[str]:
        """Names of the cities in the payload, in payload order."""
        items = self.data.get("items")
        if isinstance(items, list):
            return [str(item.get("name", "")) for item in items]
        if "name" in self.data:
            return [str(self.data["name"])]
        return []
