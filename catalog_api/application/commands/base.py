"""
Базовые классы для команд (Commands).

Команда представляет намерение изменить состояние системы.
Command Handler обрабатывает команду и выполняет соответствующие действия.
"""

from abc import ABC
from typing import ClassVar, Generic, TypeVar

from ..common.request import Request, RequestHandler


# Тип переменная для результата команды
TResult = TypeVar('TResult')


class Command(Request, ABC):
    """
    Базовый класс для команд.

    Команда - это объект, который представляет намерение
    изменить состояние системы. Команды всегда именуются
    в повелительном наклонении (CreateProduct, UpdateProductStock и т.д.).

    Команды должны быть:
    - Неизменяемыми (immutable)
    - Самодостаточными (содержать все необходимые данные)
    - Транзакционными по умолчанию (transactional = True)

    Пример:
        >>> class RenameProductCommand(Command):
        ...     product_id: UUID
        ...     name: str
        >>>
        >>> command = RenameProductCommand(product_id=product.id, name="Widget")
    """

    transactional: ClassVar[bool] = True


class CommandHandler(RequestHandler[Command, TResult], Generic[TResult]):
    """
    Базовый класс для обработчиков команд.

    Command Handler отвечает за выполнение команды:
    - Проверка существования связанных сущностей
    - Вызов методов агрегатов
    - Сохранение изменений через Unit of Work
    - Возврат Result с DTO

    Пример:
        >>> class RenameProductHandler(CommandHandler[ProductDTO]):
        ...     async def handle(self, command: RenameProductCommand) -> Result[ProductDTO]:
        ...         product = await self._uow.products.get_by_id(command.product_id)
        ...         ...
    """
