import argparse
import logging
import os
import sys

from openapi_routes.config import (
    DEFAULT_CONFIG,
    DEFAULT_OUTPUT,
    DEFAULT_TARGET,
    OpenApiConfig,
)
from openapi_routes.exceptions import GeneratorError, RetrievalError
from openapi_routes.generator import ApiClientGenerator
from openapi_routes.internal.generator.client_generator import TARGETS
from openapi_routes.internal.parser.loader import load_document
from openapi_routes.internal.types.models import Project


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _generate_client_core(config: OpenApiConfig) -> Project:
    """Ядро генерации - только генерация без сохранения"""
    print(f"🚀 Генерация клиента из {config.input}")

    print("📥 Загрузка OpenAPI спецификации...")
    openapi_spec = load_document(config.input)

    print("⚙️ Генерация кода...")
    generator = ApiClientGenerator(
        openapi_spec,
        target=config.target or DEFAULT_TARGET,
        base_url=config.base_url or "",
        strict=config.strict,
        source_url=config.input,
    )
    project = generator.generate()

    for warning in generator.warnings:
        print(f"⚠️ {warning}")

    return project


def _save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    os.makedirs(target_path, exist_ok=True)
    for code_model in project.files:
        path = os.path.join(target_path, code_model.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_model))

    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {os.path.abspath(target_path)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация dispatch-хелпера и функций-оберток из OpenAPI"
    )
    parser.add_argument(
        "-i", "--input", type=str, help="URL или путь к OpenAPI спецификации"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help=f"Директория для сгенерированных файлов (по умолчанию {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--target",
        choices=sorted(TARGETS),
        help=f"Язык генерируемого кода (по умолчанию {DEFAULT_TARGET})",
    )
    parser.add_argument(
        "--base-url", type=str, help="Адрес API, к которому добавляется общий путь"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Ошибка при неподдерживаемых методах и совпадающих именах функций",
    )
    parser.add_argument(
        "--config", type=str, default=DEFAULT_CONFIG, help="Путь к openapi.toml"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл openapi.toml"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Отладочный лог")
    return parser


def generate(argv=None):
    """Команда генерации клиента"""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if args.init_config:
        config = OpenApiConfig(
            input=args.input,
            output=args.output or DEFAULT_OUTPUT,
            target=args.target or DEFAULT_TARGET,
            base_url=args.base_url,
            strict=args.strict,
        )
        config.save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}")
        return

    file_config = OpenApiConfig.from_file(args.config)
    if file_config:
        print(f"📋 Используется конфиг из {args.config}")
        final_config = file_config.merge_with_args(args)
    else:
        final_config = OpenApiConfig().merge_with_args(args)

    if not final_config.input:
        print("❌ Ошибка: Укажите --input или создайте конфиг с --init-config")
        sys.exit(1)

    output = final_config.output or DEFAULT_OUTPUT

    try:
        project = _generate_client_core(final_config)
    except RetrievalError as e:
        print(f"❌ Ошибка загрузки спецификации: {e}")
        sys.exit(1)
    except GeneratorError as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    _save_project_files(project, os.path.abspath(output))


if __name__ == "__main__":
    generate()
