from abc import ABC, abstractmethod
from typing import List

from ..types.models import CodeFile, Function, PathLiteral, PathTemplate


class Printer(ABC):
    """Рендер CodeFile в текст; GeneratedUnit - список строк"""

    language: str = ""

    def render(self, code_file: CodeFile) -> str:
        return "\n".join(self.render_lines(code_file))

    @abstractmethod
    def render_lines(self, code_file: CodeFile) -> List[str]:
        """Строки файла целиком"""

    @abstractmethod
    def render_function(self, function: Function) -> List[str]:
        """Строки одной функции-обертки"""

    def render_path(self, path: PathTemplate) -> str:
        if not path.interpolated:
            return self.string_literal(str(path))

        return self.template_literal(
            [
                self.escape_template_text(s.text)
                if isinstance(s, PathLiteral)
                else self.interpolation(s.name)
                for s in path.segments
            ]
        )

    @abstractmethod
    def string_literal(self, value: str) -> str:
        pass

    @abstractmethod
    def template_literal(self, parts: List[str]) -> str:
        pass

    @abstractmethod
    def escape_template_text(self, text: str) -> str:
        pass

    @abstractmethod
    def interpolation(self, name: str) -> str:
        pass
