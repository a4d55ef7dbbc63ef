from typing import Any, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from starlette import status

INTERNAL_ERROR_MESSAGE = "Internal server error"


def api_success(data: Any = None, message: Optional[str] = None,
                status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap a payload in the {success, data, message} envelope"""
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def api_error(message: str, errors: Optional[List[str]] = None,
              status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def api_internal_error() -> JSONResponse:
    return api_error(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def file_response(content: bytes, filename: str, media_type: str) -> Response:
    headers = {
        'Content-Disposition': f'attachment; filename="{filename}"',
    }
    return Response(content=content, media_type=media_type, headers=headers)
