import logging
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...exceptions import GenerationError
from ..types.document import ApiDocument
from ..types.models import CodeBlock, CodeFile, Project
from ..utils import extract_common_base_path, strip_base_path
from .functions import SUPPORTED_METHODS, build_endpoint_function
from .templates import templates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Target(ABC):
    """Параметры целевого языка"""

    language: str
    client_file: str
    routes_file: str
    client_name: str
    payload_name: str
    routes_imports: tuple
    client_template: str

    @abstractmethod
    def client_instance(self, base_url: str) -> str:
        """Строка создания экземпляра ApiClient"""


class TypeScriptTarget(Target):
    def client_instance(self, base_url: str) -> str:
        quoted = "'" + base_url.replace("\\", "\\\\").replace("'", "\\'") + "'"
        return f"export const {self.client_name} = new ApiClient({{ baseUrl: {quoted} }});"


class PythonTarget(Target):
    def client_instance(self, base_url: str) -> str:
        return f"{self.client_name} = ApiClient(base_url={base_url!r})"


TARGETS: Dict[str, Target] = {
    "typescript": TypeScriptTarget(
        language="typescript",
        client_file="client.ts",
        routes_file="routes.api.ts",
        client_name="apiClient",
        payload_name="requestBody",
        routes_imports=("import { apiClient } from './client';",),
        client_template=templates.typescript_client,
    ),
    "python": PythonTarget(
        language="python",
        client_file="client.py",
        routes_file="routes_api.py",
        client_name="api_client",
        payload_name="request_body",
        routes_imports=("from typing import Any", "", "from .client import api_client"),
        client_template=templates.python_client,
    ),
}


class ClientGenerator:
    """Генератор dispatch-хелпера и функций-оберток из ApiDocument"""

    def __init__(
        self,
        document: ApiDocument,
        target: str = "typescript",
        base_url: str = "",
        strict: bool = False,
    ):
        if target not in TARGETS:
            raise GenerationError(
                f"Unknown target {target!r}, expected one of: {', '.join(TARGETS)}"
            )

        self.document = document
        self.target = TARGETS[target]
        self.base_url = base_url or ""
        self.strict = strict
        self.project = Project(name="api")
        self.common_path = ""
        self.routes_file: Optional[CodeFile] = None
        self.warnings: List[str] = []

    def generate(self) -> Project:
        """Основная генерация; каждый вызов начинает с пустого проекта"""
        self.project = Project(name="api")
        self.routes_file = None
        self.warnings = []

        self.common_path = extract_common_base_path(self.document.path_names())
        logger.debug(f"Common base path: {self.common_path!r}")

        self._create_client_file()
        self._generate_routes()
        self._check_generated_routes()
        self._finalize_structure()
        return self.project

    def _create_client_file(self):
        """Dispatch-хелпер и его экземпляр с явным base URL"""
        client_file = self.project.add_file(
            self.target.client_file, language=self.target.language
        )
        client_file.add_code_block(CodeBlock(code=self.target.client_template))
        client_file.add_code_block(
            CodeBlock(
                code=self.target.client_instance(
                    self.base_url.rstrip("/") + self.common_path
                )
            )
        )

    def _generate_routes(self):
        """Функции-обертки в порядке объявления путей и методов"""
        routes_file = self.project.add_file(
            self.target.routes_file, language=self.target.language
        )
        routes_file.imports.extend(self.target.routes_imports)

        for path, path_entry in self.document.paths.items():
            relative_path = strip_base_path(path, self.common_path)
            for method, operation in path_entry.items():
                routes_file.add_function(
                    build_endpoint_function(
                        method,
                        relative_path,
                        operation,
                        client_name=self.target.client_name,
                        payload_name=self.target.payload_name,
                    )
                )

        self.routes_file = routes_file

    def _check_generated_routes(self):
        """Неподдерживаемые методы и совпадающие имена функций"""
        functions = self.routes_file.functions

        for function in functions:
            if function.method not in SUPPORTED_METHODS:
                self._report(
                    f"{function.name}: method {function.method!r} is not supported "
                    f"by the dispatch helper ({', '.join(SUPPORTED_METHODS)})"
                )

        counts = Counter(f.name for f in functions)
        for name, count in counts.items():
            if count > 1:
                paths = [f"{f.method.upper()} {f.path}" for f in functions if f.name == name]
                self._report(
                    f"{name}: generated {count} times ({'; '.join(paths)}), "
                    f"the last definition shadows the others"
                )

    def _report(self, message: str):
        if self.strict:
            raise GenerationError(message)

        logger.warning(message)
        self.warnings.append(message)

    def _finalize_structure(self):
        """Пакетный __init__.py для Python клиента"""
        if self.target.language == "python":
            self.project.add_file("__init__.py", language="python").add_code_block(
                CodeBlock(code=templates.python_package)
            )
