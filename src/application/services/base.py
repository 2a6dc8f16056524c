"""Service logging mixin for the ledger's application services.

Every service binds its class name and ledger component once, then
derives an operation-scoped logger per call. Rejected operations are
logged through a single helper so each rejection line carries the same
error fields as the LedgerResult returned to the caller.

Usage:
    from src.application.services.base import LoggingMixin

    class CatalogService(LoggingMixin):
        def __init__(self, repository: LicenseCatalogRepositoryProtocol) -> None:
            self._repository = repository
            self._init_logger(component="license_catalog")

        def add(self, caller: Principal, license_type_id: str) -> bool:
            log = self._log_operation("add", license_type_id=license_type_id)
            ...
            log.info("license_type_added")
"""

import structlog

from src.domain.exceptions import LedgerError
from src.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Structured logging for ledger services.

    Bound on every line:
    - service: The class name of the service
    - component: The ledger subsystem (verifier_registry, applicant_registry,
      license_catalog, completion_ledger, or "ledger" for the call surface)

    Bound per operation:
    - operation: The ledger operation name
    - correlation_id: Shared by all lines of one ledger call

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "ledger") -> None:
        """Bind the service and component names.

        Call at the end of __init__.

        Args:
            component: Ledger subsystem the service belongs to.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Return a logger scoped to one operation.

        Args:
            operation: Ledger operation name.
            **context: Identifiers of the records the operation touches.

        Returns:
            BoundLogger with operation and correlation context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )

    def _log_rejection(
        self,
        operation: str,
        error: LedgerError,
        **context: object,
    ) -> None:
        """Log a rejected operation at warning with its error code.

        Args:
            operation: Ledger operation name.
            error: The domain error that stopped the operation.
            **context: Identifiers of the records the operation touched.
        """
        self._log_operation(operation, **context).warning(
            "operation_rejected",
            error=error.code.name,
            code=int(error.code),
            category=error.category,
        )
