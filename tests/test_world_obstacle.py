import logging

import pytest
from numpy.random import default_rng

from castiron.hexgrid import OutOfBoundsError, Position
from castiron.world import Context, Element, Obstacle


def _assert_valid_chain(obstacle: Obstacle, ctx: Context) -> None:
    cells = obstacle.positions
    assert 1 <= len(cells) <= ctx.max_obstacle_len + 1
    assert len(set(cells)) == len(cells)
    for previous, current in zip(cells, cells[1:]):
        assert previous.is_neighbor(current)
    for cell in cells:
        assert cell.x + cell.y + cell.z == 0
        assert max(abs(cell.x), abs(cell.y), abs(cell.z)) <= ctx.grid_radius


@pytest.mark.parametrize("seed", range(40))
def test_random_obstacles_are_contiguous_and_bounded(seed: int) -> None:
    ctx = Context(grid_radius=6, max_obstacle_len=8)
    obstacle = Obstacle.random(ctx, default_rng(seed))

    _assert_valid_chain(obstacle, ctx)
    assert obstacle.element is not Element.UNSET
    assert obstacle.origin == obstacle.positions[0]


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 99])
def test_open_grid_without_termination_uses_full_budget(seed: int) -> None:
    ctx = Context(grid_radius=10, max_obstacle_len=5, obstacle_termination_odds=0.0)
    obstacle = Obstacle.random(ctx, default_rng(seed), origin=Position.default())

    assert len(obstacle) == 6
    assert obstacle.origin == Position.default()
    _assert_valid_chain(obstacle, ctx)


def test_certain_termination_leaves_only_origin() -> None:
    ctx = Context(grid_radius=10, max_obstacle_len=5, obstacle_termination_odds=1.0)
    obstacle = Obstacle.random(ctx, default_rng(3))

    assert len(obstacle) == 1


def test_zero_length_budget_leaves_only_origin() -> None:
    ctx = Context(grid_radius=10, max_obstacle_len=0, obstacle_termination_odds=0.0)
    obstacle = Obstacle.random(ctx, default_rng(3), origin=Position(2, -1, -1))

    assert list(obstacle) == [Position(2, -1, -1)]


@pytest.mark.parametrize("seed", range(20))
def test_walk_stops_quietly_when_boxed_in(seed: int) -> None:
    # A radius-1 grid has seven cells, far fewer than the step budget.
    ctx = Context(grid_radius=1, max_obstacle_len=30, obstacle_termination_odds=0.0)
    obstacle = Obstacle.random(ctx, default_rng(seed))

    assert 2 <= len(obstacle) <= 7
    _assert_valid_chain(obstacle, ctx)


def test_same_seed_reproduces_layout_but_not_identity() -> None:
    ctx = Context()
    first = Obstacle.random(ctx, default_rng(42))
    second = Obstacle.random(ctx, default_rng(42))

    assert first.positions == second.positions
    assert first.element is second.element
    assert first.uid != second.uid


def test_origin_is_checked_against_grid() -> None:
    ctx = Context(grid_radius=10)

    with pytest.raises(OutOfBoundsError):
        Obstacle.random(ctx, default_rng(0), origin=Position(11, -11, 0))


def test_direct_construction_validates_chain() -> None:
    chain = [Position(0, 0, 0), Position(0, 1, -1), Position(-1, 2, -1)]
    obstacle = Obstacle.new(chain, Element.EARTH)

    assert obstacle.positions == tuple(chain)
    assert obstacle.element is Element.EARTH
    assert Position(0, 1, -1) in obstacle
    assert Position(5, -5, 0) not in obstacle

    with pytest.raises(ValueError):
        Obstacle.new([], Element.FIRE)
    with pytest.raises(ValueError):
        Obstacle.new([Position(0, 0, 0), Position(2, -1, -1)], Element.FIRE)
    with pytest.raises(ValueError):
        Obstacle.new(
            [Position(0, 0, 0), Position(0, 1, -1), Position(0, 0, 0)],
            Element.FIRE,
        )


def test_generation_logs_its_progress(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="castiron.world.obstacle")
    ctx = Context(max_obstacle_len=3, obstacle_termination_odds=0.0)

    Obstacle.random(ctx, default_rng(8), origin=Position.default())

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "Origin of random obstacle: (0,0,0)"
    assert any(message.startswith("Finished obstacle of 4 cells") for message in messages)
