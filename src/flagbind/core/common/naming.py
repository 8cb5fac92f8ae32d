from __future__ import annotations


def to_camel_case(name: str) -> str:
    """Join the underscore-delimited tokens of ``name`` as title-cased words.

    Each token has its first character upper-cased and the remainder
    lower-cased, so ``max_size`` and ``MAX_SIZE`` both become ``MaxSize``.

    Args:
        name: The argument name to normalize.

    Returns:
        The normalized key used for field lookup.
    """
    return "".join(token.capitalize() for token in name.split("_"))


def to_field_key(field_name: str) -> str:
    """Normalize a declared field name into the lookup key convention.

    Unlike :func:`to_camel_case` the tail of each token is kept verbatim, so
    a field already spelled ``MaxSize`` keeps its own name.
    """
    return "".join(token[:1].upper() + token[1:] for token in field_name.split("_"))
