"""Генератор dispatch-хелпера и функций-оберток из OpenAPI спецификаций"""

from .exceptions import GenerationError, GeneratorError, RetrievalError
from .generator import ApiClientGenerator, generate_client

__version__ = "0.1.0"

__all__ = [
    "ApiClientGenerator",
    "generate_client",
    "GeneratorError",
    "GenerationError",
    "RetrievalError",
]
