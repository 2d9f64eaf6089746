import collections.abc
import typing

from .casing import CaseStyle
from .exceptions import ConfigValidationError, UnknownOptionsError
from .models import DEFAULT_SCHEMA, EmbeddedSpec, Schema
from .options import OptionSpec, option_spec

SCHEMA_OPTIONS = (
    "blacklist",
    "whitelist",
    "links",
    "embedded",
    "top_level_links",
    "top_level_meta",
    "convert_case",
)

EMBEDDED_OPTIONS = ("type", "schema", "links")


def _check_unknown(
    options: typing.Mapping[str, typing.Any],
    known: typing.Sequence[str],
    path: typing.Sequence[str],
) -> None:
    unknown = [k for k in options if k not in known]
    if unknown:
        raise UnknownOptionsError(unknown, path)


def _string_list(value: typing.Any, path: typing.Sequence[str]) -> typing.Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ConfigValidationError(
            f"must be a list of strings, got {type(value).__name__}", path
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigValidationError(
                f"must be a string, got {type(item).__name__}", (*path, str(i))
            )
    return tuple(value)


def _option_spec(value: typing.Any, path: typing.Sequence[str]) -> OptionSpec:
    try:
        return option_spec(value)
    except TypeError as e:
        raise ConfigValidationError(str(e), path) from e


def _case_style(value: typing.Any, path: typing.Sequence[str]) -> typing.Optional[CaseStyle]:
    if value is None or isinstance(value, CaseStyle):
        return value
    try:
        return CaseStyle(value)
    except ValueError:
        raise ConfigValidationError(
            f"must be one of {', '.join(repr(s.value) for s in CaseStyle)}, got {value!r}",
            path,
        ) from None


def build_embedded_spec(
    options: typing.Any, path: typing.Sequence[str] = ()
) -> EmbeddedSpec:
    if isinstance(options, EmbeddedSpec):
        return options
    if not isinstance(options, collections.abc.Mapping):
        raise ConfigValidationError(
            f"must be a mapping, got {type(options).__name__}", path
        )
    _check_unknown(options, EMBEDDED_OPTIONS, path)
    type_ = options.get("type")
    if type_ is None:
        raise ConfigValidationError("is required", (*path, "type"))
    if not isinstance(type_, str):
        raise ConfigValidationError(
            f"must be a string, got {type(type_).__name__}", (*path, "type")
        )
    schema = options.get("schema")
    if schema is None:
        schema = DEFAULT_SCHEMA
    elif not isinstance(schema, str):
        raise ConfigValidationError(
            f"must be a string, got {type(schema).__name__}", (*path, "schema")
        )
    return EmbeddedSpec(
        type=type_,
        schema=schema,
        links=_option_spec(options.get("links"), (*path, "links")),
    )


def build_schema(options: typing.Optional[typing.Mapping[str, typing.Any]] = None) -> Schema:
    """
    Validates registration options and fills in their defaults.

    :param options: a mapping of the recognized options.
    :return: a :py:class:`Schema`.
    :raises ConfigValidationError: if the options do not have the recognized shape.
    """
    if options is None:
        options = {}
    elif not isinstance(options, collections.abc.Mapping):
        raise ConfigValidationError(f"options must be a mapping, got {type(options).__name__}")
    _check_unknown(options, SCHEMA_OPTIONS, ())

    embedded_options = options.get("embedded")
    if embedded_options is None:
        embedded_options = {}
    elif not isinstance(embedded_options, collections.abc.Mapping):
        raise ConfigValidationError(
            f"must be a mapping, got {type(embedded_options).__name__}", ("embedded",)
        )
    embedded: typing.Dict[str, EmbeddedSpec] = {}
    for name, spec in embedded_options.items():
        if not isinstance(name, str) or not name:
            raise ConfigValidationError(
                f"relationship names must be non-empty strings, got {name!r}", ("embedded",)
            )
        embedded[name] = build_embedded_spec(spec, ("embedded", name))

    return Schema(
        blacklist=frozenset(_string_list(options.get("blacklist"), ("blacklist",))),
        whitelist=_string_list(options.get("whitelist"), ("whitelist",)),
        links=_option_spec(options.get("links"), ("links",)),
        top_level_links=_option_spec(options.get("top_level_links"), ("top_level_links",)),
        top_level_meta=_option_spec(options.get("top_level_meta"), ("top_level_meta",)),
        embedded=embedded,
        convert_case=_case_style(options.get("convert_case"), ("convert_case",)),
    )
