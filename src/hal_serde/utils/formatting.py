import typing


def english_enumerate(items: typing.Iterable[str], conj: str = " and ") -> str:
    """
    Joins ``items`` into an English enumeration: ``"a"``, ``"a and b"``, ``"a, b and c"``.
    """
    names = list(items)
    if len(names) < 2:
        return "".join(names)
    return ", ".join(names[:-1]) + conj + names[-1]


def last_path_segment(href: str) -> str:
    """
    Returns the trailing path segment of ``href``, ignoring any query string,
    fragment and trailing slashes.
    """
    path = href.split("#", 1)[0].split("?", 1)[0].rstrip("/")
    return path.rsplit("/", 1)[-1]
