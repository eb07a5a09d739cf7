# Utils package (identifier formatting)

from src.paging.utils.identifiers import camelize, capitalize

__all__ = ["camelize", "capitalize"]
