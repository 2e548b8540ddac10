from fastapi import status


class ApiError(Exception):
    """Base for errors that end a request with an error envelope"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidArgument(ApiError):
    """Malformed identifier or missing required field"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamFailure(ApiError):
    """Media-upload provider returned no result"""
    status_code = status.HTTP_400_BAD_REQUEST


class InternalFailure(ApiError):
    """A persistence operation unexpectedly produced nothing"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
