from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

INVALID_REQUEST_MESSAGE = "Input tidak valid."


class DomainError(Exception):
    """Domain-level exception normalized by the registered error handler."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.code = code


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    body = {"error": exc.detail}
    if exc.code:
        body["code"] = exc.code
    return JSONResponse(body, status_code=exc.status_code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_middleware(ValidationNormalizeMiddleware)


class ValidationNormalizeMiddleware:
    """Normalize FastAPI 422 validation responses into 400 with a short error body."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        status_code = 500
        headers: List[Tuple[bytes, bytes]] = []
        body_chunks: List[bytes] = []

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal status_code, headers
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
                headers = list(message.get("headers", []))
                return
            if message["type"] == "http.response.body":
                body_chunks.append(message.get("body", b"") or b"")
                if message.get("more_body"):
                    return
            else:
                await send(message)
                return

            if status_code == 422:
                payload = json.dumps({"error": INVALID_REQUEST_MESSAGE}).encode("utf-8")
                filtered = [
                    (key, value)
                    for key, value in headers
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                filtered.append((b"content-type", b"application/json"))
                filtered.append((b"content-length", str(len(payload)).encode("ascii")))
                await send(
                    {
                        "type": "http.response.start",
                        "status": 400,
                        "headers": filtered,
                    }
                )
                await send({"type": "http.response.body", "body": payload})
                return

            await send(
                {
                    "type": "http.response.start",
                    "status": status_code,
                    "headers": headers,
                }
            )
            await send(
                {
                    "type": "http.response.body",
                    "body": b"".join(body_chunks),
                }
            )

        await self.app(scope, receive, send_wrapper)
