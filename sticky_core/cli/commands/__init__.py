"""CLI команды.

Модули:
    projects: sticky projects: проекты и стикеры.
    tags: sticky tags: реестр тегов.
    notes: sticky notes: заметки и чек-листы.
    config_cmd: sticky config: конфигурация.
"""
