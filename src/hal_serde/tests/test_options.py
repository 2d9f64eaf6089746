import pytest

from ..utils import UNSPECIFIED


@pytest.fixture
def target():
    from ..options import resolve_options

    return resolve_options


class TestResolveOptions:
    def test_literal_values(self, target):
        from ..options import Literal

        assert target(Literal({"self": "/articles"}), {}) == {"self": "/articles"}

    def test_callable_values(self, target):
        from ..options import Literal

        spec = Literal({"self": lambda data: "/articles/" + data["id"]})
        assert target(spec, {"id": "1"}) == {"self": "/articles/1"}

    def test_resolver(self, target):
        from ..options import Resolver

        spec = Resolver(lambda data: {"self": "/articles/" + data["id"]})
        assert target(spec, {"id": "1"}) == {"self": "/articles/1"}

    def test_undefined_values_are_removed(self, target):
        from ..options import Literal

        spec = Literal(
            {
                "a": None,
                "b": UNSPECIFIED,
                "c": lambda data: None,
                "d": 0,
                "e": False,
            }
        )
        assert target(spec, {}) == {"d": 0, "e": False}

    def test_empty_result_is_none(self, target):
        from ..options import EMPTY, Literal, Resolver

        assert target(EMPTY, {"id": "1"}) is None
        assert target(Literal({"count": lambda data: data.get("count")}), {}) is None
        assert target(Resolver(lambda data: None), {}) is None
        assert target(Resolver(lambda data: {}), {}) is None

    def test_context(self, target):
        from ..options import Literal, Resolver

        spec = Literal(
            {
                "one": lambda data: data,
                "two": lambda data, context: (data, context),
            }
        )
        assert target(spec, 1, 2) == {"one": 1, "two": (1, 2)}
        assert target(Resolver(lambda data, context: {"v": context}), 1, 2) == {"v": 2}

        def takes_varargs(*args):
            return {"args": args}

        assert target(Resolver(takes_varargs), 1, 2) == {"args": (1, 2)}
        assert target(Resolver(takes_varargs), 1) == {"args": (1,)}

    def test_context_is_not_passed_when_unspecified(self, target):
        from ..options import Resolver

        def with_default(data, context="none"):
            return {"context": context}

        assert target(Resolver(with_default), {}) == {"context": "none"}

    def test_errors_propagate(self, target):
        from ..options import Literal

        def broken(data):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            target(Literal({"self": broken}), {})


class TestOptionSpec:
    @pytest.fixture
    def target(self):
        from ..options import option_spec

        return option_spec

    def test_coercion(self, target):
        from ..options import EMPTY, Literal, Resolver

        def func(data):
            return {}

        assert target(None) is EMPTY
        assert target({"a": 1}) == Literal({"a": 1})
        assert target(func) == Resolver(func)
        spec = Literal({"b": 2})
        assert target(spec) is spec

    @pytest.mark.parametrize("value", [1, "links", ["self"], {1: "a"}])
    def test_invalid(self, target, value):
        with pytest.raises(TypeError):
            target(value)
