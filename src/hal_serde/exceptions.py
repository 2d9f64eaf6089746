import abc
import typing

from .utils import english_enumerate


class HALSerdeException(Exception, metaclass=abc.ABCMeta):
    pass


class ConfigValidationError(HALSerdeException):
    """
    Raised when a schema registration receives options that do not match the recognized
    option shape.
    """

    message: str
    path: typing.Tuple[str, ...]

    def __str__(self):
        if self.path:
            return f"{'.'.join(self.path)}: {self.message}"
        else:
            return self.message

    def __init__(self, message: str, path: typing.Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)


class UnknownOptionsError(ConfigValidationError):
    names: typing.Sequence[str]

    def __init__(self, names: typing.Sequence[str], path: typing.Sequence[str] = ()):
        self.names = names
        super().__init__(
            f"unknown option{'s' if len(names) > 1 else ''} {english_enumerate(names)}",
            path,
        )


class LookupFailure(HALSerdeException, metaclass=abc.ABCMeta):
    type: str

    @property
    @abc.abstractmethod
    def message(self) -> str:
        ...  # pragma: nocover

    def __str__(self):
        return self.message


class UnregisteredTypeError(LookupFailure):
    @property
    def message(self):
        return f"No type registered for {self.type}"

    def __init__(self, type: str):
        super().__init__(type)
        self.type = type


class UnregisteredSchemaError(LookupFailure):
    schema_name: str

    @property
    def message(self):
        return f"No schema {self.schema_name} registered for {self.type}"

    def __init__(self, type: str, schema_name: str):
        super().__init__(type, schema_name)
        self.type = type
        self.schema_name = schema_name
