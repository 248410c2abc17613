"""
Исключения генератора
"""

from typing import Optional


class GeneratorError(Exception):
    """Базовая ошибка генератора"""


class RetrievalError(GeneratorError):
    """Не удалось получить или разобрать OpenAPI документ"""

    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


class GenerationError(GeneratorError):
    """Нарушение строгого режима генерации"""
