"""BaseService — shared foundation for countryctl services.

Every service receives a :class:`Country` at construction time and
reports outcomes through :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from countryctl.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from countryctl.domain.country import Country

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CountryService(BaseService):
            def total_residents(self) -> ServiceResult:
                return self._ok("total_residents", {...})
    """

    def __init__(self, country: Country) -> None:
        self._country = country

    @property
    def country(self) -> Country:
        return self._country

    def _ok(
        self,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data=data or {},
            warnings=warnings or [],
            meta={"country": self._country.name, "num_cities": self._country.num_cities},
        )

    def _fail(
        self,
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        logger.info("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
