import collections.abc
import logging
import typing

from .config import build_schema
from .exceptions import UnregisteredSchemaError, UnregisteredTypeError
from .models import DEFAULT_SCHEMA, Schema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """
    A :py:class:`SchemaRegistry` holds the schemas a serializer renders resources with,
    keyed by resource type and schema name.

    Registrations are expected to complete before the registry is consulted; registering
    the same pair again replaces the previous schema.
    """

    _schemas: typing.Dict[str, typing.Dict[str, Schema]]

    def register(
        self,
        type: str,
        schema_name: typing.Union[str, typing.Mapping[str, typing.Any], None] = None,
        options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
        **kwargs: typing.Any,
    ) -> Schema:
        """
        Validates ``options`` and stores the resulting schema.

        :param str type: the resource type.
        :param schema_name: the schema name (``"default"`` if omitted).  A mapping given here is taken as ``options``.
        :param options: the registration options.
        :param kwargs: options given as keyword arguments; they take precedence over ``options``.
        :return: the registered :py:class:`Schema`.
        :raises ConfigValidationError: if the options do not have the recognized shape.
        """
        if isinstance(schema_name, collections.abc.Mapping):
            if options is not None:
                raise TypeError("options given twice")
            options, schema_name = schema_name, None
        name = schema_name or DEFAULT_SCHEMA

        merged: typing.Dict[str, typing.Any] = dict(options or {})
        merged.update(kwargs)
        schema = build_schema(merged)

        schemas = self._schemas.setdefault(type, {})
        if name in schemas:
            logger.debug("replacing schema %s registered for %s", name, type)
        else:
            logger.debug("registering schema %s for %s", name, type)
        schemas[name] = schema
        return schema

    def lookup(self, type: str, schema_name: typing.Optional[str] = None) -> Schema:
        """
        :raises UnregisteredTypeError: if ``type`` has never been registered.
        :raises UnregisteredSchemaError: if ``schema_name`` has not been registered for ``type``.
        """
        name = schema_name or DEFAULT_SCHEMA
        try:
            schemas = self._schemas[type]
        except KeyError:
            raise UnregisteredTypeError(type) from None
        try:
            return schemas[name]
        except KeyError:
            raise UnregisteredSchemaError(type, name) from None

    def types(self) -> typing.Iterator[str]:
        return iter(self._schemas)

    def schema_names(self, type: str) -> typing.Iterator[str]:
        try:
            return iter(self._schemas[type])
        except KeyError:
            raise UnregisteredTypeError(type) from None

    def __contains__(self, key: typing.Any) -> bool:
        if isinstance(key, tuple):
            type, schema_name = key
            return schema_name in self._schemas.get(type, {})
        return key in self._schemas

    def __init__(self):
        self._schemas = {}
