import collections.abc
import typing

from .models import DEFAULT_SCHEMA, Schema
from .registry import SchemaRegistry
from .types import JSONObject
from .utils.formatting import last_path_segment

RESERVED_KEYS = ("_links", "_embedded")


def _is_sequence(value: typing.Any) -> bool:
    return isinstance(value, collections.abc.Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def identifier_from_link(link: typing.Any) -> typing.Optional[str]:
    """
    Extracts the trailing path segment of the ``href`` of a link object, or returns
    :py:const:`None` when there is no such segment.
    """
    if isinstance(link, collections.abc.Mapping):
        href = link.get("href")
        if isinstance(href, str) and href:
            return last_path_segment(href) or None
    return None


def self_link_only(document: typing.Any) -> typing.Optional[str]:
    """
    Returns the identifier of a document that has nothing but ``_links.self.href``,
    or :py:const:`None` for any other document.
    """
    if not isinstance(document, collections.abc.Mapping) or list(document.keys()) != ["_links"]:
        return None
    links = document["_links"]
    if not isinstance(links, collections.abc.Mapping) or list(links.keys()) != ["self"]:
        return None
    self_ = links["self"]
    if not isinstance(self_, collections.abc.Mapping) or list(self_.keys()) != ["href"]:
        return None
    return identifier_from_link(self_)


class Deserializer:
    """
    A :py:class:`Deserializer` reconstructs resources from HAL documents rendered with the
    schemas of a :py:class:`SchemaRegistry`.

    Case conversion is not reverted, and link-only metadata is not restored.
    """

    registry: SchemaRegistry

    def _deserialize_links(self, links: typing.Any) -> typing.Any:
        if _is_sequence(links):
            ids = [identifier_from_link(link) for link in links]
            ids = [id_ for id_ in ids if id_ is not None]
            return ids if ids else None
        return identifier_from_link(links)

    def deserialize_embedded(
        self, type: str, document: typing.Any, schema_name: str = DEFAULT_SCHEMA
    ) -> typing.Any:
        """
        Reconstructs a related resource.  A document that only carries ``_links.self.href`` stands
        for a resource given by its identifier, which is recovered from the href.

        :return: an identifier, a resource, or :py:const:`None` if there is nothing to recover.
        """
        id_ = self_link_only(document)
        if id_ is not None:
            return id_
        if not isinstance(document, collections.abc.Mapping):
            return None
        resource = self.deserialize_resource(type, document, schema_name)
        return resource if resource else None

    def _deserialize_relationship(
        self, schema: Schema, name: str, value: typing.Any
    ) -> typing.Any:
        spec = schema.embedded[name]
        if _is_sequence(value):
            values = [self.deserialize_embedded(spec.type, v, spec.schema) for v in value]
            values = [v for v in values if v is not None]
            return values if values else None
        return self.deserialize_embedded(spec.type, value, spec.schema)

    def deserialize_resource(
        self, type: str, document: JSONObject, schema_name: str = DEFAULT_SCHEMA
    ) -> typing.Dict[str, typing.Any]:
        """
        Reconstructs a resource from its document.

        :param str type: the registered resource type.
        :param JSONObject document: the document of the resource.
        :param str schema_name: the schema the document has been rendered with.
        :return: a dictionary of the attributes and the relationships.
        """
        schema = self.registry.lookup(type, schema_name)
        resource: typing.Dict[str, typing.Any] = {
            k: v for k, v in document.items() if k not in RESERVED_KEYS
        }

        embedded = document.get("_embedded")
        if isinstance(embedded, collections.abc.Mapping):
            for name, value in embedded.items():
                if schema.is_relationship(name):
                    value = self._deserialize_relationship(schema, name, value)
                    if value is not None:
                        resource[name] = value

        links = document.get("_links")
        if isinstance(links, collections.abc.Mapping):
            for name in schema.embedded:
                if name in resource or name not in links:
                    continue
                value = self._deserialize_links(links[name])
                if value is not None:
                    resource[name] = value
        return resource

    def deserialize(
        self,
        type: str,
        document: typing.Optional[JSONObject],
        schema_name: typing.Optional[str] = None,
    ) -> typing.Union[typing.Dict[str, typing.Any], typing.List[typing.Any], None]:
        """
        Reconstructs a resource, or a collection of resources, from a HAL document.

        :param str type: the registered resource type.
        :param JSONObject document: the HAL document.
        :param str schema_name: the schema name (``"default"`` if omitted).
        :return: a resource, a list of resources, or :py:const:`None` for an empty document.
        :raises UnregisteredTypeError: if ``type`` has not been registered.
        :raises UnregisteredSchemaError: if the schema has not been registered for ``type``.
        """
        name = schema_name or DEFAULT_SCHEMA
        self.registry.lookup(type, name)
        if not document:
            return None

        embedded = document.get("_embedded")
        if isinstance(embedded, collections.abc.Mapping) and _is_sequence(embedded.get(type)):
            return [self.deserialize_resource(type, d, name) for d in embedded[type]]
        return self.deserialize_resource(type, document, name)

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry
