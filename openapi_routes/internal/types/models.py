import re
from typing import Optional, Union, Literal, List

from pydantic import BaseModel


PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")


class PathLiteral(BaseModel):
    kind: Literal["literal"] = "literal"
    text: str


class PathPlaceholder(BaseModel):
    kind: Literal["placeholder"] = "placeholder"
    name: str


class PathTemplate(BaseModel):
    """Путь вызова: литеральные куски и плейсхолдеры {name}"""

    segments: List[Union[PathLiteral, PathPlaceholder]] = []
    interpolated: bool = False

    @classmethod
    def from_path(cls, path: str, interpolated: bool = False) -> "PathTemplate":
        segments: List[Union[PathLiteral, PathPlaceholder]] = []
        position = 0

        for match in PLACEHOLDER_PATTERN.finditer(path):
            if match.start() > position:
                segments.append(PathLiteral(text=path[position : match.start()]))
            segments.append(PathPlaceholder(name=match.group(1)))
            position = match.end()

        if position < len(path) or not segments:
            segments.append(PathLiteral(text=path[position:]))

        return cls(segments=segments, interpolated=interpolated)

    @property
    def placeholders(self) -> List[str]:
        return [s.name for s in self.segments if isinstance(s, PathPlaceholder)]

    def __str__(self):
        return "".join(
            s.text if isinstance(s, PathLiteral) else "{" + s.name + "}"
            for s in self.segments
        )


class Parameter(BaseModel):
    name: str
    kind: Literal["path", "payload"] = "path"


class DispatchCall(BaseModel):
    """Вызов метода dispatch-хелпера: client.verb(path[, payload])"""

    client: str
    verb: str
    path: PathTemplate
    payload: Optional[str] = None


class CodeBlock(BaseModel):
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "    ")


class Function(BaseModel):
    name: str
    parameters: list[Parameter] = []
    call: DispatchCall

    # Исходные метод и путь эндпоинта
    method: str = ""
    path: str = ""

    @property
    def payload(self) -> Optional[Parameter]:
        for parameter in self.parameters:
            if parameter.kind == "payload":
                return parameter
        return None


class CodeFile(BaseModel):
    file_name: str
    language: Literal["typescript", "python"] = "typescript"

    imports: list[str] = []
    code_blocks: list[CodeBlock] = []
    # Список, а не словарь: одноименные функции остаются в исходном порядке
    functions: list[Function] = []

    def __str__(self):
        from ..printers import get_printer

        return get_printer(self.language).render(self)

    def add_function(self, function: "Function") -> "Function":
        self.functions.append(function)
        return function

    def add_code_block(self, code_block: "CodeBlock") -> "CodeFile":
        self.code_blocks.append(code_block)
        return self

    def function_names(self) -> List[str]:
        return [f.name for f in self.functions]


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)
        else:
            code_file = file_name

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None
