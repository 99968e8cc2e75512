"""Модель заказа на доставку"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Order:
    """Заказ, прочитанный из строки входного файла"""
    order_number: str
    weight: float
    district: str
    delivery_time: datetime
    order_id: uuid.UUID = field(default_factory=uuid.uuid4)
