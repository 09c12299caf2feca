import pytest
from numpy.random import default_rng

from castiron.hexgrid import HexDirection, Provider, Side, Vertex


def test_side_provider_walks_counter_clockwise_from_after_start() -> None:
    provider = Provider(Side.SOUTHEAST)

    assert list(provider) == [
        Side.NORTHEAST,
        Side.NORTH,
        Side.NORTHWEST,
        Side.SOUTHWEST,
        Side.SOUTH,
        Side.SOUTHEAST,
    ]


def test_vertex_provider_wraps_through_east() -> None:
    provider = Provider(Vertex.EAST)

    assert list(provider) == [
        Vertex.NORTHEAST,
        Vertex.NORTHWEST,
        Vertex.WEST,
        Vertex.SOUTHWEST,
        Vertex.SOUTHEAST,
        Vertex.EAST,
    ]


@pytest.mark.parametrize("start", list(Side) + list(Vertex))
def test_provider_yields_each_direction_exactly_once(start: HexDirection) -> None:
    yielded = list(Provider(start))

    assert len(yielded) == 6
    assert set(yielded) == set(type(start))
    assert yielded[0] is not start
    assert yielded[0] is start.rotated()
    assert yielded[-1] is start
    for previous, current in zip(yielded, yielded[1:]):
        assert current is previous.rotated()


def test_provider_stays_exhausted() -> None:
    provider = Provider(Side.NORTH)
    assert provider.count() == 6
    assert provider.step_index == 0
    assert not provider.exhausted

    for _ in range(6):
        next(provider)
    assert provider.current is Side.NORTH

    with pytest.raises(StopIteration):
        next(provider)
    assert provider.exhausted
    assert provider.step_index == 7

    with pytest.raises(StopIteration):
        next(provider)
    assert provider.step_index == 7
    assert provider.current is Side.NORTH


def test_random_provider_is_complete_and_reproducible() -> None:
    first = Provider.random(Side, default_rng(5))
    second = Provider.random(Side, default_rng(5))

    assert first.current is second.current
    sides = list(first)
    assert sides == list(second)
    assert set(sides) == set(Side)


def test_random_providers_start_in_every_direction() -> None:
    rng = default_rng(2024)
    starts = {Provider.random(Vertex, rng).current for _ in range(300)}

    assert starts == set(Vertex)
