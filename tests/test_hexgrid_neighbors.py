import pytest

from castiron.hexgrid import Position
from castiron.world import Context

CTX = Context(grid_radius=10)


def test_neighbors_of_origin_follow_side_order() -> None:
    neighbors = list(Position.default().neighbors(CTX))

    assert neighbors == [
        Position(1, 0, -1),
        Position(0, 1, -1),
        Position(-1, 1, 0),
        Position(-1, 0, 1),
        Position(0, -1, 1),
        Position(1, -1, 0),
    ]


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        (
            Position(10, -10, 0),
            {
                (10, -9, -1),
                (9, -9, 0),
                (9, -10, 1),
            },
        ),
        (
            Position(0, 10, -10),
            {
                (-1, 10, -9),
                (0, 9, -9),
                (1, 9, -10),
            },
        ),
        (
            Position(5, -10, 5),
            {
                (5, -9, 4),
                (4, -9, 5),
                (4, -10, 6),
                (6, -10, 4),
            },
        ),
        (
            Position(3, -2, -1),
            {
                (4, -2, -2),
                (3, -1, -2),
                (2, -1, -1),
                (2, -2, 0),
                (3, -3, 0),
                (4, -3, -1),
            },
        ),
    ],
)
def test_neighbors_exact_sets_near_edges(
    position: Position, expected: set[tuple[int, int, int]]
) -> None:
    actual = {(n.x, n.y, n.z) for n in position.neighbors(CTX)}
    assert actual == expected


def test_radius_one_ring_cells_have_three_neighbors() -> None:
    ctx = Context(grid_radius=1)
    ring = list(Position.default().neighbors(ctx))

    assert len(ring) == 6
    for cell in ring:
        assert len(list(cell.neighbors(ctx))) == 3
