"""Загрузка OpenAPI спецификации по URL или из локального файла"""

import json
import logging
from typing import Any, Dict, Optional

import httpx
import jsonref

from ...exceptions import RetrievalError

logger = logging.getLogger(__name__)


def is_url(locator: str) -> bool:
    return locator.startswith(("http://", "https://"))


def fetch_document(url: str, client: Optional[httpx.Client] = None) -> Any:
    """Загрузка спецификации по HTTP"""
    logger.debug(f"Fetching OpenAPI spec from {url}")
    try:
        if client is not None:
            response = client.get(url)
        else:
            response = httpx.get(url, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        raise RetrievalError(
            f"Failed to fetch OpenAPI spec: {exc.response.status_code} "
            f"{exc.response.reason_phrase}",
            source=url,
        ) from exc
    except httpx.HTTPError as exc:
        raise RetrievalError(f"Error fetching OpenAPI spec: {exc}", source=url) from exc
    except ValueError as exc:
        raise RetrievalError(f"Invalid JSON: {exc}", source=url) from exc


def read_document(file_path: str) -> Any:
    """Чтение спецификации из локального файла"""
    logger.debug(f"Reading OpenAPI spec from {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise RetrievalError(
            f"Error reading OpenAPI spec from file: {exc}", source=file_path
        ) from exc
    except ValueError as exc:
        raise RetrievalError(f"Invalid JSON: {exc}", source=file_path) from exc


def load_document(
    locator: str, client: Optional[httpx.Client] = None
) -> Dict[str, Any]:
    """
    Загрузка OpenAPI документа.

    Ссылки $ref разрешаются лениво через jsonref: сам документ не
    раскрывается, ссылки читаются только при обращении к ним.
    """
    if is_url(locator):
        raw_document = fetch_document(locator, client)
    else:
        raw_document = read_document(locator)

    if not isinstance(raw_document, dict):
        raise RetrievalError(
            "OpenAPI spec must be a JSON object", source=locator
        )

    return jsonref.replace_refs(raw_document)
