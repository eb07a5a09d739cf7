"""In-memory article storage that executes paginated queries.

Stands in for the database layer: it consumes only the normalized
accessors of a PaginationRequest (search, order field, sort direction,
offset and limit) and returns the matching page plus the total count.
"""

import asyncio
import logging
from uuid import UUID

from src.paging.domain.article import Article
from src.paging.domain.ordering import SortDirection
from src.paging.domain.pagination import PaginationRequest
from src.paging.repositories.interfaces import PageRepositoryInterface
from src.paging.services.registry import PaginationContract

logger = logging.getLogger(__name__)


class ArticleRepository(PageRepositoryInterface[Article]):
    """Keeps articles in a dict keyed by ID.

    Search matches case-insensitively against title and body. Articles
    whose order column is None sort after all others in both directions.
    """

    def __init__(
        self,
        contract: PaginationContract,
        articles: list[Article] | None = None,
    ) -> None:
        """Initialize repository.

        Args:
            contract: Pagination contract registered for Article
            articles: Initial articles
        """
        self._contract = contract
        self._articles: dict[UUID, Article] = {a.id: a for a in articles or []}
        self._lock = asyncio.Lock()

    async def add(self, article: Article) -> Article:
        async with self._lock:
            self._articles[article.id] = article
        return article

    async def get_by_id(self, item_id: UUID) -> Article | None:
        return self._articles.get(item_id)

    async def list_page(self, request: PaginationRequest) -> tuple[list[Article], int]:
        """Return one page of articles and the total number of matches.

        Args:
            request: Decoded pagination request for Article

        Returns:
            Tuple of (articles on the page, total matching articles)
        """
        matches = list(self._articles.values())

        term = request.search()
        if term:
            needle = term.lower()
            matches = [
                a for a in matches if needle in a.title.lower() or needle in a.body.lower()
            ]

        column = self._contract.column_for(request.order_field())
        present = [a for a in matches if getattr(a, column) is not None]
        missing = [a for a in matches if getattr(a, column) is None]
        present.sort(
            key=lambda a: getattr(a, column),
            reverse=request.sort_direction() == SortDirection.Desc,
        )
        ordered = present + missing

        offset = request.offset()
        page = ordered[offset : offset + request.limit()]

        logger.debug(
            "Article page: order=%s %s offset=%d limit=%d -> %d of %d",
            column,
            request.sort_direction().value,
            offset,
            request.limit(),
            len(page),
            len(ordered),
        )
        return page, len(ordered)
