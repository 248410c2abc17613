import logging

from ..types.document import Operation
from ..types.models import DispatchCall, Function, Parameter, PathTemplate
from ..utils import path_to_identifier

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("get", "post", "put", "delete")


def build_function_name(method: str, relative_path: str) -> str:
    """get + /users/{id} -> getUsersId"""
    return f"{method.lower()}{path_to_identifier(relative_path)}"


def build_endpoint_function(
    method: str,
    relative_path: str,
    operation: Operation,
    client_name: str = "apiClient",
    payload_name: str = "requestBody",
) -> Function:
    """
    Сборка функции-обертки над dispatch-хелпером.

    Параметры функции: path-параметры операции в порядке объявления, затем
    тело запроса, если оно есть. Путь становится шаблоном с интерполяцией,
    только когда у операции объявлен хотя бы один path-параметр.

    Неизвестные методы (patch, head, ...) не отклоняются: вызов уйдет в
    одноименный метод хелпера.
    """
    verb = method.lower()
    path_params = [p.name for p in operation.path_parameters]

    parameters = [Parameter(name=name, kind="path") for name in path_params]

    payload = None
    if operation.has_request_body:
        payload = payload_name
        parameters.append(Parameter(name=payload_name, kind="payload"))

    call = DispatchCall(
        client=client_name,
        verb=verb,
        path=PathTemplate.from_path(relative_path, interpolated=bool(path_params)),
        payload=payload,
    )

    function = Function(
        name=build_function_name(method, relative_path),
        parameters=parameters,
        call=call,
        method=verb,
        path=relative_path,
    )
    logger.debug(f"Synthesized {function.name} for {verb.upper()} {relative_path}")
    return function
