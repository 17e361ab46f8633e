"""
Отправка запросов в медиатор и преобразование Result в HTTP ответ.

Правила:
- успешный Result -> success_status (200 или 201 с Location)
- неуспешный Result с сообщением not_found -> 404
- прочие неуспешные Result (валидация, бизнес-ошибки) -> 400
- CategoryHasProductsError -> 409, прочие DomainError -> 400
- любое другое исключение -> 500 с общим сообщением
- ошибка разбора тела или параметров запроса -> 400 с "Validation failed"
"""

import logging
from typing import Callable, Optional

from fastapi import Request as FastAPIRequest, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...application.common import MessageConstants, Request, Result
from ...application.pipeline import Mediator
from ...core.errors import CategoryHasProductsError, DomainError

logger = logging.getLogger("catalog-api.api.responses")


def result_response(
    result: Result,
    success_status: int = status.HTTP_200_OK,
    not_found: Optional[str] = None,
    location: Optional[Callable[[Result], str]] = None
) -> JSONResponse:
    """
    Преобразовать Result в JSONResponse.

    Args:
        result: Результат обработчика
        success_status: HTTP статус успешного ответа
        not_found: Сообщение, которое означает 404
        location: Функция, строящая Location для успешного ответа
    """
    if result.is_success:
        headers = {"Location": location(result)} if location else None
        return JSONResponse(
            status_code=success_status,
            content=result.to_response(),
            headers=headers
        )

    if not_found is not None and result.message == not_found:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=result.to_response())

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.to_response())


async def send_request(
    mediator: Mediator,
    request: Request,
    success_status: int = status.HTTP_200_OK,
    not_found: Optional[str] = None,
    location: Optional[Callable[[Result], str]] = None
) -> JSONResponse:
    """
    Выполнить запрос через медиатор и построить HTTP ответ.

    Args:
        mediator: Медиатор запроса
        request: Команда или запрос
        success_status: HTTP статус успешного ответа
        not_found: Сообщение, которое означает 404
        location: Функция, строящая Location для успешного ответа
    """
    request_name = type(request).__name__
    try:
        result = await mediator.send(request)
    except CategoryHasProductsError as e:
        logger.warning(f"{request_name} rejected: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=Result.failure(e.message).to_response()
        )
    except DomainError as e:
        logger.warning(f"{request_name} rejected: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=Result.failure(e.message).to_response()
        )
    except Exception as e:
        logger.error(f"Error handling {request_name}: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=Result.failure(MessageConstants.INTERNAL_SERVER_ERROR).to_response()
        )

    if result.is_failure:
        logger.info(f"{request_name} failed: {result.message}")

    return result_response(result, success_status, not_found, location)


async def validation_exception_handler(request: FastAPIRequest, exc: RequestValidationError) -> JSONResponse:
    """
    Ошибки разбора тела и параметров запроса -> 400 с неуспешным Result.

    Каждая ошибка превращается в строку "<поле>: <сообщение>".
    """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        message = error.get("msg", "Invalid value")
        errors.append(f"{field}: {message}" if field else message)

    logger.info(f"Malformed request to {request.method} {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=Result.failure(MessageConstants.VALIDATION_FAILED, errors).to_response()
    )
