"""
Перенос аудит-полей из модели БД в доменную сущность.
"""

from ....domain.shared.base_entity import Entity
from ..models import AuditMixin

AUDIT_FIELDS = ("created_at", "updated_at", "created_by", "updated_by")


def copy_audit_fields(model: AuditMixin, entity: Entity) -> None:
    """
    Скопировать аудит-поля модели в сущность.

    Вызывается при загрузке сущности и после flush, когда
    слушатель аудита заполнил поля модели.
    """
    for field in AUDIT_FIELDS:
        setattr(entity, field, getattr(model, field))
