# resume_generator/base_path.py
"""Serve the app below a URL prefix derived from the server's script path."""

from __future__ import annotations

import posixpath
from typing import Optional

from starlette.types import ASGIApp, Receive, Scope, Send


def compute_base_path(script_name: str) -> Optional[str]:
    """
    Directory part of ``script_name`` without trailing slash.
    Returns None when the app sits at the web root.

    >>> compute_base_path("/sub/dir/index.php")
    '/sub/dir'
    >>> compute_base_path("/index.php") is None
    True
    """
    normalized = (script_name or "").replace("\\", "/").rstrip("/")
    base = posixpath.dirname(normalized).rstrip("/")
    if not base or base in ("/", "."):
        return None
    return base


class BasePathMiddleware:
    """
    Mark requests under ``base_path`` with a matching root_path. The path keeps
    its prefix (ASGI convention); Starlette routing removes root_path once, so
    routes are declared as if the app were mounted at "/".
    """

    def __init__(self, app: ASGIApp, base_path: str) -> None:
        self.app = app
        self.base_path = base_path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket"):
            path = scope["path"]
            # match on a segment boundary: /sub/dir2 is not under /sub/dir
            if path == self.base_path or path.startswith(self.base_path + "/"):
                scope = dict(scope)
                if path == self.base_path:
                    # bare prefix is the homepage
                    scope["path"] = self.base_path + "/"
                scope["root_path"] = self.base_path
        await self.app(scope, receive, send)
