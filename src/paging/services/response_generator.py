"""Generate per-entity response envelopes and the JSON response adapter."""

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.paging.domain.pagination import PaginationResponse

logger = logging.getLogger(__name__)


def build_response_model(entity_model: type[BaseModel]) -> type[PaginationResponse]:
    """Create ``{Entity}PaginationResponse`` wrapping pages of ``entity_model``.

    The generated class subclasses ``PaginationResponse[entity_model]`` so
    it serializes with the camel-case keys ``total``, ``page``, ``pages``
    and ``data``.
    """
    name = f"{entity_model.__name__}PaginationResponse"
    model = type(
        name,
        (PaginationResponse[entity_model],),
        {"__module__": __name__, "__doc__": f"Page of {entity_model.__name__} items."},
    )
    logger.debug("Built %s", name)
    return model


def respond(body: BaseModel) -> JSONResponse:
    """Turn a single entity or an envelope into a 200 JSON response.

    Args:
        body: Entity model instance or PaginationResponse instance

    Returns:
        JSONResponse serialized with field aliases
    """
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(mode="json", by_alias=True),
    )
