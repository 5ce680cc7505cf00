"""Внутренние ORM модели Peewee (скрыты от внешнего API).

Классы:
    BaseModel
        Базовая модель без привязки к БД.
    KeyValueModel
        Строка key-value хранилища.
"""

from datetime import datetime

from peewee import DateTimeField, Model, TextField


class BaseModel(Model):
    """Базовая модель.

    База данных привязывается в адаптере через bind_ctx.
    """

    class Meta:
        database = None


class KeyValueModel(BaseModel):
    """Запись хранилища.

    Attributes:
        key: Ключ (первичный).
        value: Строковое значение (обычно JSON).
        updated_at: Время последней записи.
    """

    key = TextField(primary_key=True)
    value = TextField()
    updated_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "key_value"
