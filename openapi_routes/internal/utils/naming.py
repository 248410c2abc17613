"""Утилиты для работы с путями эндпоинтов и именами функций"""

import re
from typing import Sequence

PATH_SEPARATOR = "/"


def find_common_prefix(strings: Sequence[str]) -> str:
    """
    Наибольший общий посимвольный префикс всех строк.

    Кандидат (первая строка) укорачивается по одному символу, пока не станет
    префиксом каждой строки. Пустой кандидат возвращается сразу.

    Examples:
        >>> find_common_prefix(["/api/users", "/api/orders"])
        '/api/'
        >>> find_common_prefix(["/a", "/b"])
        '/'
    """
    if not strings:
        return ""

    prefix = strings[0]
    for string in strings[1:]:
        while not string.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""

    return prefix


def extract_common_base_path(paths: Sequence[str]) -> str:
    """
    Общий корневой путь всех эндпоинтов без завершающего разделителя.

    Срезается ровно один завершающий "/". Сравнение посимвольное, поэтому
    префикс может разрезать сегмент пути: ["/apple", "/apricot"] -> "/ap".

    Examples:
        >>> extract_common_base_path(["/api/users", "/api/orders"])
        '/api'
        >>> extract_common_base_path(["/a/b/c"])
        '/a/b/c'
    """
    if not paths:
        return ""

    common_prefix = find_common_prefix(paths)
    if common_prefix.endswith(PATH_SEPARATOR):
        return common_prefix[:-1]
    return common_prefix


def strip_base_path(path: str, base_path: str) -> str:
    """Относительный путь эндпоинта"""
    if base_path and path.startswith(base_path):
        return path[len(base_path) :]
    return path


def path_to_identifier(path: str) -> str:
    """
    PascalCase фрагмент имени функции из относительного пути.

    Examples:
        >>> path_to_identifier("/users/{id}")
        'UsersId'
        >>> path_to_identifier("/a-b_c")
        'ABC'
        >>> path_to_identifier("/")
        ''
    """
    if path.startswith(PATH_SEPARATOR):
        path = path[1:]

    # {user_id} -> user_id
    path = re.sub(r"\{([^}]+)\}", r"\1", path)

    parts = [part for part in re.split(r"[^a-zA-Z0-9]+", path) if part]

    return "".join(part[0].upper() + part[1:] for part in parts)
