"""
Dev Server Static Files

Serves the dashboard from STATIC_ROOT. /foo is tried as /foo.html, then as
/foo/index.html, the same fallbacks a static export needs.
"""

import mimetypes
import os
import stat
from pathlib import Path, PurePosixPath

from starlette.datastructures import Headers
from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, Response
from starlette.staticfiles import NotModifiedResponse, StaticFiles
from starlette.types import Scope

from gamelayer_proxy.common.errors import NotFoundError

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".ico": "image/x-icon",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".svg": "image/svg+xml",
}
FALLBACK_MIME_TYPE = "application/octet-stream"

READ_METHODS = ("GET", "HEAD")


def guess_mime_type(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in MIME_TYPES:
        return MIME_TYPES[suffix]
    return mimetypes.guess_type(path.name)[0] or FALLBACK_MIME_TYPE


class DashboardStaticFiles(StaticFiles):
    """
    Static files for the dev server

    Any request method reads the file (outside /api/v0 every verb is a plain
    file read). Missing files and paths outside the directory raise
    NotFoundError.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        if scope["method"] not in READ_METHODS:
            scope = {**scope, "method": "GET"}

        # Extensionless paths: /foo.html first, then /foo/index.html
        if path != "." and not PurePosixPath(path).suffix:
            for candidate in (f"{path}.html", os.path.join(path, "index.html")):
                full_path, stat_result = self.lookup_path(candidate)
                if stat_result is not None and stat.S_ISREG(stat_result.st_mode):
                    return self.file_response(full_path, stat_result, scope)

        try:
            return await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code == 404:
                raise NotFoundError() from e
            raise

    def file_response(
        self,
        full_path,
        stat_result: os.stat_result,
        scope: Scope,
        status_code: int = 200,
    ) -> Response:
        response = FileResponse(
            full_path,
            status_code=status_code,
            stat_result=stat_result,
            media_type=guess_mime_type(Path(full_path)),
        )
        if self.is_not_modified(response.headers, Headers(scope=scope)):
            return NotModifiedResponse(response.headers)
        return response
