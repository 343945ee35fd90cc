"""
Application shell and client module.

The catch-all route must be included last: it answers every GET that no
other route claimed (the guard has already turned anonymous visitors away).
"""

import os

from fastapi import APIRouter
from fastapi.responses import FileResponse

import config
import facade.client
from errors import error_response

router = APIRouter(tags=["shell"])

NO_CACHE = "private, no-cache, no-store, must-revalidate"


@router.get("/client-module")
async def client_module():
    """Source of the data access façade, never cached by the browser."""
    return FileResponse(
        facade.client.__file__,
        media_type="text/x-python",
        headers={"Cache-Control": NO_CACHE},
    )


@router.get("/{full_path:path}", include_in_schema=False)
async def app_shell(full_path: str):
    if full_path == "api" or full_path.startswith("api/"):
        return error_response(404, "Not found")
    if not os.path.isfile(config.SHELL_INDEX):
        return error_response(404, "Application shell not found")
    return FileResponse(config.SHELL_INDEX, media_type="text/html")
