"""Identifier formatting helpers for generated pagination types.

Schema field names arrive in snake_case (``published_at``). Orderable-field
enum members use the capitalized form (``PublishedAt``) and travel over the
wire in camel case (``publishedAt``).
"""


def capitalize(name: str) -> str:
    """Convert a snake_case name into a capitalized identifier.

    Empty segments are dropped, so leading, trailing and repeated
    underscores disappear. A name made only of underscores yields ``""``.

    Examples:
        >>> capitalize("hello_world")
        'HelloWorld'
        >>> capitalize("_hello_world_")
        'HelloWorld'
        >>> capitalize("___")
        ''
    """
    return "".join(
        segment[0].upper() + segment[1:] for segment in name.split("_") if segment
    )


def camelize(identifier: str) -> str:
    """Lowercase the first character of a capitalized identifier.

    Examples:
        >>> camelize("PublishedAt")
        'publishedAt'
    """
    if not identifier:
        return identifier
    return identifier[0].lower() + identifier[1:]
