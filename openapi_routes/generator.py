"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Dict, Any

from .internal.generator.client_generator import ClientGenerator
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import Project


class ApiClientGenerator:
    """Чистый интерфейс для генерации клиента из OpenAPI"""

    def __init__(
        self,
        openapi_spec: Dict[str, Any],
        target: str = "typescript",
        base_url: str = "",
        strict: bool = False,
        source_url: str = None,
    ):
        self.parser = OpenApiParser(openapi_spec, source_url)
        self.target = target
        self.base_url = base_url
        self.strict = strict
        self.warnings = []

    def generate(self) -> Project:
        """Генерация проекта клиента"""
        document = self.parser.parse()
        generator = ClientGenerator(
            document, target=self.target, base_url=self.base_url, strict=self.strict
        )
        project = generator.generate()
        self.warnings = generator.warnings
        return project


def generate_client(openapi_spec: Dict[str, Any], **kwargs) -> Project:
    """Создание клиента из OpenAPI спецификации"""
    return ApiClientGenerator(openapi_spec, **kwargs).generate()
