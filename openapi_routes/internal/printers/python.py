from typing import List

from ..types.models import CodeFile, Function
from .base import Printer


class PythonPrinter(Printer):
    language = "python"

    def render_lines(self, code_file: CodeFile) -> List[str]:
        chunks: List[List[str]] = []

        if code_file.imports:
            chunks.append(list(code_file.imports))

        for code_block in code_file.code_blocks:
            chunks.append(str(code_block).split("\n"))

        for function in code_file.functions:
            chunks.append(self.render_function(function))

        lines: List[str] = []
        for i, chunk in enumerate(chunks):
            if i:
                lines.extend(["", ""])
            lines.extend(chunk)

        # Завершающий перевод строки
        lines.append("")
        return lines

    def render_function(self, function: Function) -> List[str]:
        parameters = ", ".join(
            f"{p.name}: Any" if p.kind == "payload" else p.name
            for p in function.parameters
        )

        arguments = [self.render_path(function.call.path)]
        if function.call.payload:
            arguments.append(function.call.payload)

        call = f"{function.call.client}.{function.call.verb}({', '.join(arguments)})"

        return [
            f"async def {function.name}({parameters}) -> Any:",
            f"    return await {call}",
        ]

    def string_literal(self, value: str) -> str:
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'

    def template_literal(self, parts: List[str]) -> str:
        return 'f"' + "".join(parts) + '"'

    def escape_template_text(self, text: str) -> str:
        return (
            text.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("{", "{{")
            .replace("}", "}}")
        )

    def interpolation(self, name: str) -> str:
        return "{" + name + "}"
