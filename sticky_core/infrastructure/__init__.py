"""Инфраструктурный слой (реализации интерфейсов).

Модули:
    storage
        Носители key-value хранилища.
"""
