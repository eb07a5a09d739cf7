# Repositories package (data access abstraction)

from src.paging.repositories.article_repository import ArticleRepository
from src.paging.repositories.interfaces import PageRepositoryInterface

__all__ = ["ArticleRepository", "PageRepositoryInterface"]
