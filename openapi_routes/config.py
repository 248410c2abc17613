"""
Конфигурация для генерации клиента
"""

import os
from typing import Optional
import toml
from dataclasses import dataclass

DEFAULT_CONFIG = "openapi.toml"
DEFAULT_OUTPUT = "./__generated__"
DEFAULT_TARGET = "typescript"


@dataclass
class OpenApiConfig:
    """Конфигурация генератора"""

    input: Optional[str] = None
    output: Optional[str] = None
    target: Optional[str] = None
    base_url: Optional[str] = None
    strict: bool = False

    @classmethod
    def from_file(cls, config_path: str = DEFAULT_CONFIG) -> Optional["OpenApiConfig"]:
        """Загрузка конфигурации из файла"""
        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        return cls(
            input=config_data.get("input"),
            output=config_data.get("output", DEFAULT_OUTPUT),
            target=config_data.get("target", DEFAULT_TARGET),
            base_url=config_data.get("base_url"),
            strict=bool(config_data.get("strict", False)),
        )

    def save_to_file(self, config_path: str = DEFAULT_CONFIG) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "input": self.input,
            "output": self.output,
            "target": self.target,
            "base_url": self.base_url,
            "strict": self.strict,
        }
        # toml не умеет None
        config_data = {k: v for k, v in config_data.items() if v is not None}

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "OpenApiConfig":
        """Объединение с аргументами командной строки"""
        return OpenApiConfig(
            input=args.input or self.input,
            output=args.output or self.output,
            target=args.target or self.target,
            base_url=args.base_url if args.base_url is not None else self.base_url,
            strict=args.strict or self.strict,
        )
