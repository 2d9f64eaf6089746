import collections.abc
import enum
import re
import typing


class CaseStyle(enum.Enum):
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    CAMEL_CASE = "camelCase"


_leading_re = re.compile(r"^[_\-]*")
_separator_re = re.compile(r"[\W_]+")


def _is_word_boundary(prev: str, cur: str, next_: str) -> bool:
    if not cur.isupper():
        return False
    # "articleID" -> article|ID, "HTTPServer" -> HTTP|Server
    return prev.islower() or prev.isdigit() or (prev.isupper() and next_.islower())


def split_words(name: str) -> typing.List[str]:
    words: typing.List[str] = []
    for chunk in _separator_re.split(name):
        start = 0
        for i in range(1, len(chunk)):
            if _is_word_boundary(chunk[i - 1], chunk[i], chunk[i + 1 : i + 2]):
                words.append(chunk[start:i])
                start = i
        if chunk:
            words.append(chunk[start:])
    return words


def convert_case(name: str, style: CaseStyle) -> str:
    """
    Rewrites ``name`` in the given case style.  Leading underscores and dashes are kept as is,
    so that names like ``_id`` survive the conversion.
    """
    match = _leading_re.match(name)
    prefix = match.group(0) if match is not None else ""
    words = split_words(name[len(prefix) :])
    if not words:
        return name
    if style is CaseStyle.SNAKE_CASE:
        body = "_".join(w.lower() for w in words)
    elif style is CaseStyle.KEBAB_CASE:
        body = "-".join(w.lower() for w in words)
    elif style is CaseStyle.CAMEL_CASE:
        body = words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])
    else:
        raise AssertionError("never get here")
    return prefix + body


def convert_keys(value: typing.Any, style: CaseStyle) -> typing.Any:
    """
    Recursively rewrites the keys of every mapping found in ``value``.  Values are left untouched.
    """
    if isinstance(value, collections.abc.Mapping):
        return {
            (convert_case(k, style) if isinstance(k, str) else k): convert_keys(v, style)
            for k, v in value.items()
        }
    elif isinstance(value, (list, tuple)):
        return [convert_keys(v, style) for v in value]
    else:
        return value
