import typing

from .deserializer import Deserializer
from .interfaces import ResourceAdapter, YieldPoint
from .models import Schema
from .registry import SchemaRegistry
from .serializer import SchemaNameOrOptions, Serializer
from .ticks import next_tick
from .types import JSONObject, MutableJSONObject


class HALSerializer:
    """
    :py:class:`HALSerializer` bundles a :py:class:`SchemaRegistry` with a serializer and a
    deserializer working off it.

    .. code-block:: python

       hal = HALSerializer()
       hal.register("article", blacklist=["updated"])
       hal.serialize("article", {"id": "1", "title": "HAL", "updated": "2015-05-22"})
    """

    registry: SchemaRegistry
    serializer: Serializer
    deserializer: Deserializer

    def register(
        self,
        type: str,
        schema_name: typing.Union[str, typing.Mapping[str, typing.Any], None] = None,
        options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
        **kwargs: typing.Any,
    ) -> Schema:
        return self.registry.register(type, schema_name, options, **kwargs)

    def serialize(
        self,
        type: str,
        data: typing.Any,
        schema_name: SchemaNameOrOptions = None,
        extra_options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
    ) -> MutableJSONObject:
        return self.serializer.serialize(type, data, schema_name, extra_options)

    def serialize_async(
        self,
        type: str,
        data: typing.Any,
        schema_name: SchemaNameOrOptions = None,
        extra_options: typing.Optional[typing.Mapping[str, typing.Any]] = None,
    ) -> typing.Awaitable[JSONObject]:
        return self.serializer.serialize_async(type, data, schema_name, extra_options)

    def deserialize(
        self,
        type: str,
        document: typing.Optional[JSONObject],
        schema_name: typing.Optional[str] = None,
    ) -> typing.Union[typing.Dict[str, typing.Any], typing.List[typing.Any], None]:
        return self.deserializer.deserialize(type, document, schema_name)

    def __init__(
        self,
        registry: typing.Optional[SchemaRegistry] = None,
        adapter: typing.Optional[ResourceAdapter] = None,
        yield_point: YieldPoint = next_tick,
    ):
        self.registry = registry if registry is not None else SchemaRegistry()
        self.serializer = Serializer(self.registry, adapter=adapter, yield_point=yield_point)
        self.deserializer = Deserializer(self.registry)
