"""
:py:mod:`hal_serde.serializer` renders resources to HAL documents.

Synopsis
--------

.. code-block:: python

   registry = SchemaRegistry()
   registry.register(
       "article",
       links={"self": lambda data: {"href": f"/articles/{data['id']}"}},
       embedded={"author": {"type": "people"}},
   )
   registry.register("people")

   serializer = Serializer(registry)
   serializer.serialize("article", {"id": "1", "title": "HAL", "author": {"id": "2"}})
   # {
   #     "_links": {"self": {"href": "/articles/1"}},
   #     "id": "1",
   #     "title": "HAL",
   #     "_embedded": {"author": {"id": "2"}},
   # }

"""

import collections.abc
import logging
import typing

from .adapters import DefaultResourceAdapter
from .casing import convert_case
from .interfaces import ResourceAdapter, Shape, YieldPoint
from .models import EmbeddedSpec, Schema
from .options import resolve_options
from .projection import project_attributes
from .registry import SchemaRegistry
from .ticks import next_tick
from .types import JSONObject, Links, MutableJSONObject
from .utils import UNSPECIFIED

logger = logging.getLogger(__name__)

SchemaNameOrOptions = typing.Union[str, typing.Mapping[str, typing.Any], None]


def normalize_arguments(
    schema_name: SchemaNameOrOptions,
    extra_options: typing.Optional[typing.Mapping[str, typing.Any]],
) -> typing.Tuple[typing.Optional[str], typing.Mapping[str, typing.Any]]:
    if isinstance(schema_name, collections.abc.Mapping):
        if extra_options is not None:
            raise TypeError("extra options given twice")
        return None, schema_name
    return schema_name, (extra_options if extra_options is not None else {})


class Serializer:
    registry: SchemaRegistry
    adapter: ResourceAdapter
    _yield_point: YieldPoint

    def _serialize_top_level(
        self, schema: Schema, extra_options: typing.Mapping[str, typing.Any]
    ) -> MutableJSONObject:
        envelope: MutableJSONObject = {}
        links = resolve_options(schema.top_level_links, extra_options)
        if links is not None:
            envelope["_links"] = links
        meta = resolve_options(schema.top_level_meta, extra_options)
        if meta is not None:
            envelope.update(meta)
        return envelope

    def _merge_body(self, envelope: MutableJSONObject, body: typing.Any) -> MutableJSONObject:
        # an empty body, either None or [], contributes nothing to the envelope
        if isinstance(body, collections.abc.Mapping):
            envelope.update(body)
        return envelope

    def _serialize_resource(
        self, resource: typing.Mapping[str, typing.Any], schema: Schema, context: typing.Any
    ) -> MutableJSONObject:
        links: Links = resolve_options(schema.links, resource, context) or {}
        attributes = project_attributes(resource, schema)
        embedded = self.serialize_embedded(resource, schema, links, context)

        serialized: MutableJSONObject = {}
        if links:
            serialized["_links"] = links
        serialized.update(attributes)
        if embedded is not None:
            serialized["_embedded"] = embedded
        return serialized

    def serialize_data(
        self, type: str, data: typing.Any, schema: Schema, context: typing.Any = UNSPECIFIED
    ) -> typing.Union[MutableJSONObject, typing.List[typing.Any], None]:
        """
        Renders a resource or a collection of resources.

        :param str type: the resource type, used as the ``_embedded`` key of a collection.
        :param Any data: a resource or a sequence of resources.
        :param Schema schema: the schema to render with.
        :param Any context: the extra options of the current call, handed to link callables.
        :return: the rendered document, :py:const:`None` for an empty resource or ``[]`` for an empty collection.
        """
        shape = self.adapter.classify(data)
        if shape is Shape.EMPTY:
            return None
        elif shape is Shape.ARRAY:
            if not data:
                return []
            return {
                "_embedded": {type: [self.serialize_data(type, d, schema, context) for d in data]}
            }
        elif shape is Shape.COMPOSITE:
            return self._serialize_resource(self.adapter.to_mapping(data), schema, context)
        else:
            raise TypeError(f"cannot serialize {data!r} as a {type} resource")

    def serialize_embedded(
        self,
        resource: typing.Mapping[str, typing.Any],
        schema: Schema,
        links: Links,
        context: typing.Any = UNSPECIFIED,
    ) -> typing.Optional[MutableJSONObject]:
        """
        Renders the relationships of a resource.  Links of the related resources are added to ``links``.

        :return: the ``_embedded`` node, or :py:const:`None` if no relationship has been populated.
        """
        embedded: MutableJSONObject = {}
        for name, spec in schema.embedded.items():
            target_schema = self.registry.lookup(spec.type, spec.schema)
            value = self.serialize_embedded_resource(
                name, resource.get(name), spec, target_schema, links, context
            )
            if value:
                if schema.convert_case is not None:
                    name = convert_case(name, schema.convert_case)
                embedded[name] = value
        return embedded if embedded else None

    def serialize_embedded_resource(
        self,
        relation_name: str,
        relation_data: typing.Any,
        relation_spec: EmbeddedSpec,
        target_schema: Schema,
        parent_links: Links,
        context: typing.Any = UNSPECIFIED,
    ) -> typing.Union[MutableJSONObject, typing.List[typing.Any], None]:
        """
        Renders the value of a relationship.

        A related resource given as a whole is rendered under ``_embedded``, while the links
        resolved for it are added to ``parent_links`` under ``relation_name``.  A related
        resource given as a bare identifier only contributes its links.

        :param str relation_name: the name of the relationship.
        :param Any relation_data: a related resource, an identifier, or a sequence of them.
        :param EmbeddedSpec relation_spec: the declaration of the relationship.
        :param Schema target_schema: the schema the related resources are rendered with.
        :param Links parent_links: the links of the resource holding the relationship.
        :param Any context: the extra options of the current call.
        :return: the rendered related resource(s), ``[]`` for an empty collection, or :py:const:`None`.
        """
        shape = self.adapter.classify(relation_data)
        if shape is Shape.EMPTY:
            return None

        if shape is Shape.ARRAY:
            if not relation_data:
                return []
            parent_links[relation_name] = []
            serialized_items = []
            for item in relation_data:
                serialized_item = self.serialize_embedded_resource(
                    relation_name, item, relation_spec, target_schema, parent_links, context
                )
                if serialized_item:
                    serialized_items.append(serialized_item)
            if not parent_links[relation_name]:
                del parent_links[relation_name]
            return serialized_items if serialized_items else None

        if shape is Shape.COMPOSITE:
            value: typing.Any = self.adapter.to_mapping(relation_data)
        else:
            value = relation_data

        relation_links = resolve_options(relation_spec.links, value, context)

        serialized: typing.Optional[MutableJSONObject] = None
        if shape is Shape.COMPOSITE:
            serialized = {}
            if relation_links is not None:
                serialized["_links"] = relation_links
            serialized.update(self._serialize_resource(value, target_schema, context))

        if relation_links is not None:
            slot = parent_links.get(relation_name)
            if isinstance(slot, list):
                slot.append(relation_links)
            else:
                parent_links[relation_name] = relation_links

        return serialized if serialized else None

    def serialize(
        self,
        type: str,
        data: typing.Any,
        schema_name: SchemaNameOrOptions = None,
        extra_options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
    ) -> MutableJSONObject:
        """
        Renders a HAL document for a resource or a collection of resources.

        :param str type: the registered resource type.
        :param Any data: a resource or a sequence of resources.
        :param schema_name: the schema name (``"default"`` if omitted).  A mapping given here is taken as ``extra_options``.
        :param extra_options: values handed to the top-level links and meta declarations.
        :return: the HAL document.
        :raises UnregisteredTypeError: if ``type`` has not been registered.
        :raises UnregisteredSchemaError: if the schema has not been registered for ``type``.
        """
        _schema_name, _extra_options = normalize_arguments(schema_name, extra_options)
        schema = self.registry.lookup(type, _schema_name)
        envelope = self._serialize_top_level(schema, _extra_options)
        return self._merge_body(
            envelope, self.serialize_data(type, data, schema, _extra_options)
        )

    async def _serialize_async(
        self,
        type: str,
        data: typing.Any,
        schema: Schema,
        extra_options: typing.Mapping[str, typing.Any],
    ) -> MutableJSONObject:
        envelope = self._serialize_top_level(schema, extra_options)
        if self.adapter.classify(data) is not Shape.ARRAY or not data:
            return self._merge_body(
                envelope, self.serialize_data(type, data, schema, extra_options)
            )

        logger.debug("serializing %d %s resources", len(data), type)
        items: typing.List[typing.Any] = []
        for i, item in enumerate(data):
            if i > 0:
                await self._yield_point()
            items.append(self.serialize_data(type, item, schema, extra_options))
        logger.debug("serialized %d %s resources", len(items), type)
        return self._merge_body(envelope, {"_embedded": {type: items}})

    def serialize_async(
        self,
        type: str,
        data: typing.Any,
        schema_name: SchemaNameOrOptions = None,
        extra_options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
    ) -> typing.Awaitable[JSONObject]:
        """
        Same as :py:meth:`serialize`, except that the elements of a collection are rendered one
        per turn of the event loop.  Lookup failures are raised immediately; anything raised
        afterwards is raised from the returned awaitable.

        :return: an awaitable resolving to the HAL document.
        """
        _schema_name, _extra_options = normalize_arguments(schema_name, extra_options)
        schema = self.registry.lookup(type, _schema_name)
        return self._serialize_async(type, data, schema, _extra_options)

    def __init__(
        self,
        registry: SchemaRegistry,
        adapter: typing.Optional[ResourceAdapter] = None,
        yield_point: YieldPoint = next_tick,
    ):
        self.registry = registry
        self.adapter = adapter if adapter is not None else DefaultResourceAdapter()
        self._yield_point = yield_point
