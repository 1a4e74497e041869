# bookstore/responses.py
import logging
from typing import Any, Optional, Type, TypeVar

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError as DecodeError

logger = logging.getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)


class BadRequestBody(Exception):
    pass


def respond(status_code: int, payload: Optional[Any] = None) -> Response:
    if payload is None:
        return Response(status_code=status_code)
    try:
        content = jsonable_encoder(payload)
    except (TypeError, ValueError) as exc:
        logger.error("failed to encode response: %s", exc)
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=content)


def respond_error(status_code: int, message: str, headers: Optional[dict] = None) -> Response:
    logger.error("error: %s", message)
    response = respond(status_code, {"message": message})
    if headers:
        response.headers.update(headers)
    return response


async def decode_body(request: Request, model: Type[RequestModel]) -> RequestModel:
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except DecodeError as exc:
        raise BadRequestBody(str(exc)) from exc
