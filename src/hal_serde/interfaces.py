import enum
import typing


class Shape(enum.Enum):
    EMPTY = "empty"
    """Indicates there is nothing to render"""
    ARRAY = "array"
    """Indicates a collection, which may be empty"""
    COMPOSITE = "composite"
    """Indicates a resource given as a whole"""
    SCALAR = "scalar"
    """Indicates a resource given by its identifier"""


class ResourceAdapter(typing.Protocol):
    def classify(self, value: typing.Any) -> Shape:
        """
        Classifies a value into one of the shapes the serializer distinguishes.

        :param Any value: a resource, a sequence of resources, an identifier or nothing.
        :return: a :py:class:`Shape`.
        """
        ...  # pragma: nocover

    def to_mapping(self, value: typing.Any) -> typing.Mapping[str, typing.Any]:
        """
        Exposes a value classified as :py:attr:`Shape.COMPOSITE` as a mapping of field names to values.

        :param Any value: a composite value.
        :return: a mapping.
        """
        ...  # pragma: nocover


class YieldPoint(typing.Protocol):
    def __call__(self) -> typing.Awaitable[None]:
        ...  # pragma: nocover
