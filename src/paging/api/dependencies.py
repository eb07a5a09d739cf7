"""FastAPI dependencies that decode pagination query parameters."""

from collections.abc import Callable
from typing import Any

from fastapi import Request

from src.paging.domain.pagination import QUERY_ALIASES, PaginationRequest


def pagination_params(
    request_model: type[PaginationRequest],
) -> Callable[[Request], PaginationRequest]:
    """Create a dependency decoding query parameters into ``request_model``.

    Decoding failures raise UnknownOrderFieldError or
    MalformedParameterError, which the registered exception handlers turn
    into 422 responses. The dependency reads the raw query string, so pair
    it with ``pagination_openapi`` on the route to document the parameters.

    Usage:
        params: Annotated[
            PaginationRequest, Depends(pagination_params(ArticlePaginationRequest))
        ]
    """

    def dependency(request: Request) -> PaginationRequest:
        return request_model.from_query(request.query_params)

    dependency.__name__ = f"decode_{request_model.__name__}"
    return dependency


def _inline_refs(node: Any, defs: dict[str, Any]) -> Any:
    """Replace ``{"$ref": "#/$defs/X"}`` nodes with the referenced schema."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            return _inline_refs(defs[ref.rsplit("/", 1)[-1]], defs)
        return {key: _inline_refs(value, defs) for key, value in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node


def pagination_openapi(request_model: type[PaginationRequest]) -> dict[str, Any]:
    """Build ``openapi_extra`` listing the query parameters of ``request_model``.

    Each of ``page``, ``limit``, ``search``, ``sort`` and ``order`` becomes
    an optional query parameter whose schema comes from the model's JSON
    schema, so the order enumeration and the example values reach the
    generated OpenAPI document.

    Usage:
        @router.get("", openapi_extra=pagination_openapi(ArticlePaginationRequest))
    """
    schema = request_model.model_json_schema()
    defs = schema.get("$defs", {})
    properties = schema.get("properties", {})

    parameters = []
    for name in QUERY_ALIASES.values():
        prop = properties.get(name)
        if prop is None:
            continue
        prop = _inline_refs(prop, defs)
        parameter: dict[str, Any] = {
            "name": name,
            "in": "query",
            "required": False,
            "schema": prop,
        }
        if "description" in prop:
            parameter["description"] = prop["description"]
        if prop.get("examples"):
            parameter["example"] = prop["examples"][0]
        parameters.append(parameter)

    return {"parameters": parameters}
