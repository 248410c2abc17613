from typing import List

from ..types.models import CodeFile, Function
from .base import Printer


class TypeScriptPrinter(Printer):
    language = "typescript"

    def render_lines(self, code_file: CodeFile) -> List[str]:
        lines: List[str] = []

        if code_file.imports:
            lines.extend(code_file.imports)
            lines.append("")

        for code_block in code_file.code_blocks:
            lines.extend(str(code_block).split("\n"))
            lines.append("")

        for function in code_file.functions:
            lines.extend(self.render_function(function))
            lines.append("")

        return lines

    def render_function(self, function: Function) -> List[str]:
        parameters = ", ".join(
            f"{p.name}: any" if p.kind == "payload" else p.name
            for p in function.parameters
        )

        arguments = [self.render_path(function.call.path)]
        if function.call.payload:
            arguments.append(function.call.payload)

        return [
            f"export async function {function.name}({parameters}): Promise<any> {{",
            f"  return {function.call.client}.{function.call.verb}({', '.join(arguments)});",
            "}",
        ]

    def string_literal(self, value: str) -> str:
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"

    def template_literal(self, parts: List[str]) -> str:
        return "`" + "".join(parts) + "`"

    def escape_template_text(self, text: str) -> str:
        return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")

    def interpolation(self, name: str) -> str:
        return "${" + name + "}"
