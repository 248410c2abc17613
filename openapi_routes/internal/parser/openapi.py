import logging
from collections.abc import Mapping
from typing import Dict, Any

import jsonref

from ...exceptions import RetrievalError
from ..types.document import ApiDocument, Operation, ParameterDecl

logger = logging.getLogger(__name__)


class OpenApiParser:
    """Парсер OpenAPI спецификации в ApiDocument"""

    def __init__(self, openapi_dict: Dict[str, Any], source_url: str = None):
        self.openapi_dict = openapi_dict
        self.source_url = source_url

    def parse(self) -> ApiDocument:
        """Разбор путей и операций с сохранением порядка документа"""
        paths = self.openapi_dict.get("paths") or {}
        document = ApiDocument()

        try:
            for path, path_spec in paths.items():
                entry = {}
                for method, method_spec in path_spec.items():
                    # parameters/summary/servers уровня пути - не операции
                    if not isinstance(method_spec, Mapping):
                        logger.debug(f"Skipping non-operation key {method!r} in {path}")
                        continue
                    entry[method] = self._parse_operation(method_spec)
                document.paths[path] = entry
        except jsonref.JsonRefError as exc:
            raise RetrievalError(
                f"Unresolvable reference: {exc}", source=self.source_url
            ) from exc

        logger.debug(f"Parsed {len(document.paths)} paths")
        return document

    @staticmethod
    def _parse_operation(method_spec: Mapping) -> Operation:
        parameters = [
            ParameterDecl(location=param.get("in"), name=param.get("name"))
            for param in method_spec.get("parameters") or []
        ]
        return Operation(
            parameters=parameters, request_body=method_spec.get("requestBody")
        )
