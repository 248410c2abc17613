"""Входная модель: пути, операции и параметры OpenAPI документа"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ParameterDecl(BaseModel):
    location: Optional[str] = Field(default=None, alias="in")
    name: Optional[str] = None

    model_config = {"populate_by_name": True}

    @property
    def in_path(self) -> bool:
        return self.location == "path"


class Operation(BaseModel):
    parameters: List[ParameterDecl] = []
    request_body: Optional[Any] = Field(default=None, alias="requestBody")

    model_config = {"populate_by_name": True}

    @property
    def has_request_body(self) -> bool:
        return self.request_body is not None

    @property
    def path_parameters(self) -> List[ParameterDecl]:
        return [p for p in self.parameters if p.in_path]


# method -> Operation, порядок как в документе
PathEntry = Dict[str, Operation]


class ApiDocument(BaseModel):
    paths: Dict[str, PathEntry] = {}

    def path_names(self) -> List[str]:
        return list(self.paths.keys())
