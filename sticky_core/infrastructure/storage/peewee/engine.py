"""Инициализация SQLite базы через Peewee.

Функции:
    init_peewee_database
        Создаёт, настраивает и подключает SqliteDatabase.
"""

from pathlib import Path

from peewee import SqliteDatabase

from sticky_core.utils.logger import get_logger

logger = get_logger(__name__)

IN_MEMORY: str = ":memory:"


def init_peewee_database(db_path: str | Path) -> SqliteDatabase:
    """Открывает SQLite базу для key-value хранилища.

    Родительская директория файла создаётся при необходимости.
    Путь ":memory:" даёт базу в памяти (для тестов).

    Args:
        db_path: Путь к файлу БД или ":memory:".

    Returns:
        Подключённый экземпляр SqliteDatabase.
    """
    path_str = str(db_path)
    if path_str != IN_MEMORY:
        Path(path_str).expanduser().parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Initializing database", path=path_str)

    database = SqliteDatabase(
        path_str,
        pragmas={
            "journal_mode": "wal",
            "cache_size": -1024 * 8,  # 8MB
            "synchronous": 1,  # NORMAL: безопасно для WAL
        },
    )
    database.connect(reuse_if_open=True)

    logger.info("Database initialized", path=path_str)
    return database
