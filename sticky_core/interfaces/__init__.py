"""Интерфейсы (контракты) для компонентов системы.

Классы:
    BaseKeyValueStorage
        Абстрактное строковое key-value хранилище.
"""

from sticky_core.interfaces.key_value import BaseKeyValueStorage

__all__ = ["BaseKeyValueStorage"]
