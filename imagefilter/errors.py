"""
Error taxonomy for the filtering API.

Every error the service answers with derives from ``ApiError`` and knows its
own status code and JSON body. Request errors use the ``{"errors": [...]}``
envelope, auth errors keep their flat ``{"message": ...}`` shape.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from imagefilter.schemas import AuthErrorResponse, AuthFailedResponse, ErrorMessage, ErrorResponse

FILTER_USAGE = "GET /filteredimage?image_url={{}}"
SUPPORTED_FORMATS = "[bmp|gif|jpeg|jpg|png|tiff]"


class ApiError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def body(self) -> dict:
        return ErrorResponse(errors=[ErrorMessage(message=self.message)]).model_dump()


class ImageUrlMissing(ApiError):
    status_code = 400

    def __init__(self):
        super().__init__(f"image_url not provided. Try {FILTER_USAGE}")


class UnsupportedImageFormat(ApiError):
    status_code = 422

    def __init__(self):
        super().__init__(
            "provided url doesn't seem to have a supported file extension. "
            f"Accepted image formats are {SUPPORTED_FORMATS}"
        )


class ImageProcessingFailed(ApiError):
    status_code = 422

    def __init__(self, cause: Exception):
        super().__init__(f"image could not be processed. {cause}")


class AuthError(ApiError):
    status_code = 401

    def body(self) -> dict:
        return AuthErrorResponse(message=self.message).model_dump()


class AuthMissingError(AuthError):
    def __init__(self):
        super().__init__("No authorization headers.")


class AuthMalformedError(AuthError):
    def __init__(self):
        super().__init__("Malformed token.")


class AuthVerificationError(AuthError):
    def __init__(self):
        super().__init__("Failed to authenticate.")

    def body(self) -> dict:
        return AuthFailedResponse(message=self.message).model_dump()


class ImageFilterError(Exception):
    """Download or filtering of a source image failed."""


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
