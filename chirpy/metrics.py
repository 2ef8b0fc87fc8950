"""Request counting for the static file server."""

import threading

from starlette.types import ASGIApp, Receive, Scope, Send


class HitCounter:
    """Thread-safe counter owned by one application instance."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class CountHitsMiddleware:
    """ASGI wrapper that counts every HTTP request before passing it on."""

    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)
