"""Дополнительный уровень логирования TRACE.

Константы:
    TRACE: int
        Уровень 5, ниже DEBUG. Для дампов сериализованного состояния.

Функции:
    install_trace_level()
        Регистрирует имя уровня в logging (идемпотентно).
    level_from_name(name)
        Преобразует строковое имя уровня в число.
"""

import logging

TRACE: int = 5


def install_trace_level() -> None:
    """Регистрирует имя TRACE для уровня 5.

    Безопасно вызывать многократно.
    """
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Возвращает числовой уровень по имени.

    Args:
        name: Имя уровня (TRACE/DEBUG/INFO/...), регистр не важен.
        default: Значение для неизвестного имени.

    Returns:
        Числовой уровень logging.
    """
    upper = name.upper()
    if upper == "TRACE":
        return TRACE
    value = logging.getLevelName(upper)
    return value if isinstance(value, int) else default


install_trace_level()
