"""API router for paginated article listings.

Importing this module registers ``Article`` in the process-wide schema
registry (``get_registry()``) if it is not there yet. Route signatures need
the generated request and response models when the module is loaded, so
registration cannot wait for application startup. The registration is
idempotent: importing again, or registering elsewhere first, reuses the
existing contract.
"""

import logging
from functools import lru_cache
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from src.paging.api.dependencies import pagination_openapi, pagination_params
from src.paging.domain.article import Article
from src.paging.domain.pagination import PaginationRequest
from src.paging.repositories.article_repository import ArticleRepository
from src.paging.repositories.interfaces import PageRepositoryInterface
from src.paging.services.registry import PaginationContract, get_registry
from src.paging.services.response_generator import respond

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


def _article_contract() -> PaginationContract:
    """Register Article once per process and return its contract."""
    registry = get_registry()
    if Article.__name__ in registry:
        return registry.get(Article.__name__)
    return registry.register_model(Article)


ARTICLE_CONTRACT = _article_contract()
ArticlePaginationRequest = ARTICLE_CONTRACT.request_model
ArticlePaginationResponse = ARTICLE_CONTRACT.response_model


# Dependency injection


@lru_cache
def get_article_repository() -> PageRepositoryInterface[Article]:
    """Dependency provider for the shared in-memory ArticleRepository."""
    return ArticleRepository(ARTICLE_CONTRACT)


# Route handlers


@router.get(
    "",
    response_model=ArticlePaginationResponse,
    openapi_extra=pagination_openapi(ArticlePaginationRequest),
)
async def list_articles(
    repository: Annotated[
        PageRepositoryInterface[Article], Depends(get_article_repository)
    ],
    params: Annotated[
        PaginationRequest, Depends(pagination_params(ArticlePaginationRequest))
    ],
) -> JSONResponse:
    """List articles one page at a time.

    Query parameters: ``page`` (default 1), ``limit`` (default 10, max
    1000), ``search``, ``sort`` (``asc``/``desc``, default ``desc``) and
    ``order`` (``createdAt``, ``title``, ``publishedAt``; default
    ``publishedAt``).

    Returns:
        Envelope with total, page, pages and data

    Raises:
        UnknownOrderFieldError / MalformedParameterError: mapped to 422
    """
    items, total = await repository.list_page(params)
    return respond(ArticlePaginationResponse.from_page(items, total, params))


@router.get("/{article_id}", response_model=Article)
async def get_article(
    article_id: UUID,
    repository: Annotated[
        PageRepositoryInterface[Article], Depends(get_article_repository)
    ],
) -> JSONResponse:
    """Get a single article.

    Raises:
        HTTPException 404: If article not found
    """
    article = await repository.get_by_id(article_id)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Article '{article_id}' not found",
        )
    return respond(article)


@router.post("", response_model=Article, status_code=status.HTTP_201_CREATED)
async def create_article(
    article: Article,
    repository: Annotated[
        PageRepositoryInterface[Article], Depends(get_article_repository)
    ],
) -> Article:
    """Store a new article."""
    created = await repository.add(article)
    logger.info("Created article %s", created.id)
    return created
