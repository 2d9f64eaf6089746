import pytest

from ..exceptions import UnregisteredSchemaError, UnregisteredTypeError
from ..registry import SchemaRegistry
from .testing import CountingYieldPoint, TickCounter, articles, register_articles


@pytest.fixture
def registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    register_articles(registry)
    return registry


@pytest.fixture
def yield_point():
    return CountingYieldPoint()


@pytest.fixture
def target(registry, yield_point):
    from ..serializer import Serializer

    return Serializer(registry, yield_point=yield_point)


@pytest.mark.asyncio
async def test_equivalent_to_serialize(target, yield_point):
    data = articles()
    expected = target.serialize("article", data, {"count": 2})
    actual = await target.serialize_async("article", data, {"count": 2})
    assert actual == expected
    assert yield_point.count == len(data) - 1


@pytest.mark.asyncio
async def test_yields_between_elements(target, yield_point):
    data = [dict(a, id=str(i)) for i, a in enumerate(articles() * 5)]
    counter = TickCounter(len(data) * 2).start()
    try:
        result = await target.serialize_async("article", data)
    finally:
        ticks = counter.ticks
        counter.stop()
    assert ticks >= len(data) - 1
    assert yield_point.count == len(data) - 1
    assert [a["id"] for a in result["_embedded"]["article"]] == [str(i) for i in range(len(data))]


@pytest.mark.asyncio
async def test_single(target, yield_point):
    data = articles()[0]
    assert await target.serialize_async("article", data) == target.serialize("article", data)
    assert yield_point.count == 0


@pytest.mark.asyncio
async def test_empty(target):
    assert await target.serialize_async("article", [], {"count": 0}) == {
        "_links": {"self": {"href": "/articles"}},
        "count": 0,
    }


def test_lookup_failures_are_raised_immediately(target):
    with pytest.raises(UnregisteredTypeError):
        target.serialize_async("authors", [])
    with pytest.raises(UnregisteredSchemaError):
        target.serialize_async("article", [], "custom")


@pytest.mark.asyncio
async def test_errors_are_raised_from_the_awaitable(target, registry):
    def broken(data):
        if data["id"] == "2":
            raise RuntimeError("boom")
        return {"self": {"href": "/articles/" + data["id"]}}

    registry.register("article", links=broken)
    awaitable = target.serialize_async("article", articles())
    with pytest.raises(RuntimeError, match="boom"):
        await awaitable
