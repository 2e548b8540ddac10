from typing import Any
from fastapi import status


def api_response(data: Any, message: str = "success", status_code: int = status.HTTP_200_OK) -> dict:
    return {
        "status": status_code,
        "data": data,
        "message": message,
    }


def api_error(message: str, status_code: int) -> dict:
    return {
        "status": status_code,
        "message": message,
    }
