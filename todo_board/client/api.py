"""Async HTTP client for the task store service."""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ..models import Task

logger = logging.getLogger(__name__)

_task_list = TypeAdapter(list[Task])


class TaskApiError(Exception):
    """A request to the task store failed (transport, status or payload)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TaskStoreClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the ``/tasks`` resource.

    Requests are never retried and never cancelled by the client; the
    timeout is whatever the caller configured.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "TaskStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TaskApiError(
                f"{method} {path} failed with {exc.response.status_code}: {_error_text(exc.response)}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TaskApiError(f"{method} {path} failed: {exc!r}") from exc
        return response

    async def list_tasks(self) -> list[Task]:
        response = await self._request("GET", "tasks")
        try:
            return _task_list.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise TaskApiError(f"GET tasks returned an invalid payload: {exc}") from exc

    async def create_task(self, text: str) -> Task:
        response = await self._request("POST", "tasks", json={"text": text})
        return _parse_task(response)

    async def update_task(
        self, task_id: int, *, text: str | None = None, completed: bool | None = None
    ) -> Task:
        payload: dict[str, Any] = {}
        if text is not None:
            payload["text"] = text
        if completed is not None:
            payload["completed"] = completed
        response = await self._request("PUT", f"tasks/{task_id}", json=payload)
        return _parse_task(response)

    async def delete_task(self, task_id: int) -> None:
        await self._request("DELETE", f"tasks/{task_id}")


def _parse_task(response: httpx.Response) -> Task:
    try:
        return Task.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise TaskApiError(f"invalid task payload: {exc}") from exc


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return str(body)
