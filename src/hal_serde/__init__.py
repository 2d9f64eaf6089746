from .adapters import DefaultResourceAdapter  # noqa: F401
from .casing import CaseStyle, convert_case, convert_keys  # noqa: F401
from .deserializer import Deserializer  # noqa: F401
from .exceptions import (  # noqa: F401
    ConfigValidationError,
    HALSerdeException,
    LookupFailure,
    UnknownOptionsError,
    UnregisteredSchemaError,
    UnregisteredTypeError,
)
from .facade import HALSerializer  # noqa: F401
from .interfaces import ResourceAdapter, Shape  # noqa: F401
from .models import DEFAULT_SCHEMA, EmbeddedSpec, Schema  # noqa: F401
from .options import Literal, OptionSpec, Resolver, resolve_options  # noqa: F401
from .registry import SchemaRegistry  # noqa: F401
from .serializer import Serializer  # noqa: F401
from .utils import UNSPECIFIED  # noqa: F401
