class Templates:
    """Шаблоны dispatch-хелпера для генерируемых файлов"""

    typescript_client = """type HttpMethod = 'GET' | 'POST' | 'PUT' | 'DELETE';

export interface ApiClientOptions {
  readonly baseUrl: string;
}

interface RequestOptions<T> {
  method: HttpMethod;
  path: string;
  body?: T;
}

export class ApiClient {
  private readonly baseUrl: string;

  constructor(options: ApiClientOptions) {
    this.baseUrl = options.baseUrl;
  }

  async request<TResponse, TRequest = undefined>(options: RequestOptions<TRequest>): Promise<TResponse> {
    const { method, path, body } = options;
    const url = `${this.baseUrl}${path}`;
    const fetchOptions: RequestInit = {
      method,
      headers: {
        'Content-Type': 'application/json',
      },
    };

    if (body) {
      fetchOptions.body = JSON.stringify(body);
    }

    try {
      const response = await fetch(url, fetchOptions);
      if (!response.ok) {
        throw new Error(`HTTP error! Status: ${response.status}`);
      }
      return (await response.json()) as TResponse;
    } catch (error) {
      console.error('API request failed:', error);
      throw error;
    }
  }

  get<TResponse, TRequest = undefined>(path: string, body?: TRequest): Promise<TResponse> {
    return this.request<TResponse, TRequest>({ method: 'GET', path, body });
  }

  post<TResponse, TRequest = undefined>(path: string, body?: TRequest): Promise<TResponse> {
    return this.request<TResponse, TRequest>({ method: 'POST', path, body });
  }

  put<TResponse, TRequest = undefined>(path: string, body?: TRequest): Promise<TResponse> {
    return this.request<TResponse, TRequest>({ method: 'PUT', path, body });
  }

  delete<TResponse, TRequest = undefined>(path: string, body?: TRequest): Promise<TResponse> {
    return this.request<TResponse, TRequest>({ method: 'DELETE', path, body });
  }
}"""

    python_client = """import asyncio
import json
import logging
from typing import Any, Dict, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

logger = logging.getLogger(__name__)


class SendRequestError(Exception):
    def __init__(self, message, path, status_code, response_data=None):
        self.message = message
        self.path = path
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(f"[{status_code}] {path}: {message}")


class ApiClient:
    \"\"\"HTTP клиент на базе aiohttp\"\"\"

    def __init__(
            self,
            base_url: str,
            headers: Dict[str, str] = None,
            timeout: int = 30,
    ):
        self._base_url = str(base_url)
        self._headers = dict(headers) if headers else {}
        self._timeout = int(timeout) if timeout else 30
        self._session: Optional[ClientSession] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _ensure_session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=ClientTimeout(total=self._timeout),
                headers={'Content-Type': 'application/json', **self._headers},
            )
        return self._session

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        url = f"{self._base_url}{path}"
        request_kwargs = {'method': method, 'url': url}

        if body:
            request_kwargs['data'] = json.dumps(body)

        session = await self._ensure_session()
        try:
            logger.debug(f"Making {method} request to {url}")
            async with session.request(**request_kwargs) as response:
                logger.debug(f"Response status: {response.status}")
                content = await response.text()

                if not 200 <= response.status < 300:
                    raise SendRequestError(
                        f"HTTP error! Status: {response.status}",
                        path=path,
                        status_code=response.status,
                        response_data=content,
                    )

                return json.loads(content) if content else None

        except (ClientError, asyncio.TimeoutError) as exc:
            logger.error(f"API request failed: {exc}")
            raise SendRequestError(str(exc), path=path, status_code=503) from exc

    async def get(self, path: str, body: Any = None) -> Any:
        return await self.request('GET', path, body)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request('POST', path, body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request('PUT', path, body)

    async def delete(self, path: str, body: Any = None) -> Any:
        return await self.request('DELETE', path, body)

    async def close(self):
        \"\"\"Закрытие сессии\"\"\"
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()"""

    python_package = """from .client import ApiClient, SendRequestError, api_client
from . import routes_api

__all__ = ["ApiClient", "SendRequestError", "api_client", "routes_api"]"""


templates = Templates()
