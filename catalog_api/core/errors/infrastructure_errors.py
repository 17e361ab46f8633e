"""
Инфраструктурные исключения.

Исключения для ошибок работы с базой данных и транзакциями.
"""

from typing import Optional, Dict, Any
from .base import InfrastructureError


class RepositoryError(InfrastructureError):
    """
    Исключение: ошибка работы с репозиторием.

    Выбрасывается при ошибках доступа к данным через репозиторий.

    Пример:
        >>> raise RepositoryError(
        ...     operation="update",
        ...     entity_type="Product",
        ...     reason="Product is not persisted"
        ... )
    """

    def __init__(
        self,
        operation: str,
        entity_type: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция (get, add, update, delete и т.д.)
            entity_type: Тип сущности
            reason: Причина ошибки
            details: Дополнительные детали
        """
        message = (
            f"Repository error during '{operation}' "
            f"on {entity_type}: {reason}"
        )
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "entity_type": entity_type,
                "reason": reason,
                **(details or {})
            },
            error_code="REPOSITORY_ERROR"
        )


class TransactionError(InfrastructureError):
    """
    Исключение: ошибка управления транзакцией.

    Выбрасывается при некорректном использовании Unit of Work
    (например, работа вне контекста).

    Пример:
        >>> raise TransactionError(
        ...     operation="commit",
        ...     reason="Unit of work is not in context"
        ... )
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция (begin, commit, rollback, save)
            reason: Причина ошибки
            details: Дополнительные детали
        """
        message = f"Transaction error during '{operation}': {reason}"
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "reason": reason,
                **(details or {})
            },
            error_code="TRANSACTION_ERROR"
        )
