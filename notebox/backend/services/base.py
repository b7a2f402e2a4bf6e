"""
Service base class.

A service validates first and mutates second: the ``_require*`` helpers
raise business-rule errors before any SQL is issued, and the mutation
runs inside ``_transaction`` so it is committed whole or not at all.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from notebox.backend.core.exceptions import ParameterRequiredError, ValueTooLongError
from notebox.backend.core.logging import get_logger


class BaseService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        return self._session

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[None]:
        """Commit on a clean exit; roll back and re-raise the same exception otherwise."""
        try:
            yield
            await self._session.commit()
        except Exception as e:
            await self._session.rollback()
            self._logger.error(
                "Transaction rolled back",
                extra={
                    "service": type(self).__name__,
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            )
            raise

    def _require(self, value: Any, field_name: str) -> None:
        """None and whitespace-only strings count as missing."""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ParameterRequiredError(field_name)

    def _require_max_length(self, value: str, field_name: str, max_length: int) -> None:
        # Measured on the raw value, surrounding whitespace included
        if len(value) > max_length:
            raise ValueTooLongError(field_name, max_length)

    def _log_operation(self, operation: str, **context: Any) -> None:
        self._logger.info(operation, extra={"service": type(self).__name__, **context})

    def _log_debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, extra={"service": type(self).__name__, **context})
