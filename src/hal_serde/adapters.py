import collections.abc
import dataclasses
import typing

from .interfaces import ResourceAdapter, Shape


class DefaultResourceAdapter(ResourceAdapter):
    """
    Treats mappings and dataclass instances as resources, and lists, tuples and other
    non-string sequences as collections.  Everything else is an identifier.

    ``None``, empty mappings and empty strings are empty; an empty collection is still a
    collection.
    """

    def is_composite(self, value: typing.Any) -> bool:
        if isinstance(value, collections.abc.Mapping):
            return True
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def is_array(self, value: typing.Any) -> bool:
        return isinstance(value, collections.abc.Sequence) and not isinstance(
            value, (str, bytes, bytearray)
        )

    def is_empty(self, value: typing.Any) -> bool:
        if value is None:
            return True
        if isinstance(value, (str, bytes, bytearray, collections.abc.Mapping)):
            return len(value) == 0
        return False

    def classify(self, value: typing.Any) -> Shape:
        if self.is_empty(value):
            return Shape.EMPTY
        elif self.is_array(value):
            return Shape.ARRAY
        elif self.is_composite(value):
            return Shape.COMPOSITE
        else:
            return Shape.SCALAR

    def to_mapping(self, value: typing.Any) -> typing.Mapping[str, typing.Any]:
        if isinstance(value, collections.abc.Mapping):
            return value
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
