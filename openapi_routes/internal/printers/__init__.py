"""Принтеры AST в исходный код"""

from .base import Printer
from .python import PythonPrinter
from .typescript import TypeScriptPrinter

PRINTERS = {
    TypeScriptPrinter.language: TypeScriptPrinter,
    PythonPrinter.language: PythonPrinter,
}


def get_printer(language: str) -> Printer:
    try:
        return PRINTERS[language]()
    except KeyError:
        raise ValueError(f"Unknown target language: {language}") from None


__all__ = ["Printer", "PythonPrinter", "TypeScriptPrinter", "PRINTERS", "get_printer"]
