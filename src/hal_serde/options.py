"""
:py:mod:`hal_serde.options` evaluates link and meta declarations.

A declaration is either a mapping whose values are literals or callables
(:py:class:`Literal`), or a single callable returning such a mapping
(:py:class:`Resolver`).  Both are evaluated through :py:func:`resolve_options`.

Synopsis
--------

.. code-block:: python

   links = Literal({"self": lambda data: {"href": f"/articles/{data['id']}"}})
   resolve_options(links, {"id": "1"})  # {"self": {"href": "/articles/1"}}

"""

import abc
import collections.abc
import inspect
import typing

from .utils import UNSPECIFIED, is_undefined

OptionFunc = typing.Callable[..., typing.Any]


def _accepts_context(func: OptionFunc) -> bool:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


class OptionCallable:
    """
    Wraps a user supplied callable.  The callable is given the data alone, or the data and
    the context when its signature takes a second positional parameter.
    """

    func: OptionFunc
    accepts_context: bool

    def __call__(self, data: typing.Any, context: typing.Any = UNSPECIFIED) -> typing.Any:
        if self.accepts_context and context is not UNSPECIFIED:
            return self.func(data, context)
        return self.func(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.func!r})"

    def __eq__(self, other: typing.Any) -> bool:
        return isinstance(other, OptionCallable) and other.func == self.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __init__(self, func: OptionFunc):
        self.func = func
        self.accepts_context = _accepts_context(func)


class OptionSpec(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def evaluate(
        self, data: typing.Any, context: typing.Any = UNSPECIFIED
    ) -> typing.Optional[typing.Mapping[str, typing.Any]]:
        ...  # pragma: nocover


class Literal(OptionSpec):
    values: typing.Mapping[str, typing.Any]

    def evaluate(
        self, data: typing.Any, context: typing.Any = UNSPECIFIED
    ) -> typing.Optional[typing.Mapping[str, typing.Any]]:
        return {
            k: (v(data, context) if isinstance(v, OptionCallable) else v)
            for k, v in self.values.items()
        }

    def __repr__(self) -> str:
        return f"Literal({dict(self.values)!r})"

    def __eq__(self, other: typing.Any) -> bool:
        return isinstance(other, Literal) and dict(other.values) == dict(self.values)

    def __hash__(self) -> int:
        return hash(frozenset(self.values))

    def __init__(self, values: typing.Optional[typing.Mapping[str, typing.Any]] = None):
        self.values = {
            k: (OptionCallable(v) if callable(v) else v) for k, v in (values or {}).items()
        }


class Resolver(OptionSpec):
    func: OptionCallable

    def evaluate(
        self, data: typing.Any, context: typing.Any = UNSPECIFIED
    ) -> typing.Optional[typing.Mapping[str, typing.Any]]:
        return self.func(data, context)

    def __repr__(self) -> str:
        return f"Resolver({self.func.func!r})"

    def __eq__(self, other: typing.Any) -> bool:
        return isinstance(other, Resolver) and other.func == self.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __init__(self, func: OptionFunc):
        self.func = func if isinstance(func, OptionCallable) else OptionCallable(func)


EMPTY = Literal()


def option_spec(value: typing.Any) -> OptionSpec:
    """
    Coerces a raw declaration into an :py:class:`OptionSpec`.

    :param value: a mapping, a callable, :py:const:`None` or an :py:class:`OptionSpec`.
    :raises TypeError: if the value is none of them.
    """
    if value is None or value is UNSPECIFIED:
        return EMPTY
    elif isinstance(value, OptionSpec):
        return value
    elif isinstance(value, collections.abc.Mapping):
        if not all(isinstance(k, str) for k in value):
            raise TypeError("keys must be strings")
        return Literal(value)
    elif callable(value):
        return Resolver(value)
    else:
        raise TypeError(f"must be a mapping or a callable, got {type(value).__name__}")


def resolve_options(
    spec: OptionSpec, data: typing.Any, context: typing.Any = UNSPECIFIED
) -> typing.Optional[typing.Dict[str, typing.Any]]:
    """
    Evaluates ``spec`` against ``data``.

    :param OptionSpec spec: the declaration.
    :param Any data: the value the callables are given.
    :param Any context: an optional second value for callables that accept it.
    :return: a dictionary without undefined values, or :py:const:`None` if nothing remains.
    """
    candidate = spec.evaluate(data, context)
    if candidate is None:
        return None
    result = {k: v for k, v in candidate.items() if not is_undefined(v)}
    return result if result else None
