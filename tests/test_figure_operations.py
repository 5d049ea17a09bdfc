import pytest

from geo2d.errors.geometry_errors import EmptyFigureError, DegenerateInputError
from geo2d.geometry import Point, Vector
from geo2d.figures import Path, Polygon, Triangle
from geo2d.figure_operations import (
    BoundingBox,
    intersect,
    is_intersecting,
    get_bounding_extent_x,
    get_bounding_extent_y,
    get_bounding_box,
)


def create_square(x: float, y: float, side_length: float) -> Polygon:
    return Polygon((
        Point(x, y),
        Point(x + side_length, y),
        Point(x + side_length, y + side_length),
        Point(x, y + side_length)
    ))


@pytest.fixture
def square():
    return create_square(0, 0, 2)


def test_overlapping_squares(square):
    other_square = create_square(1, 1, 2)

    assert intersect(square, other_square)
    assert intersect(other_square, square)


def test_distant_squares(square):
    other_square = create_square(1, 1, 2)
    other_square.translate(Vector(10, 10))

    assert not intersect(square, other_square)
    assert not intersect(other_square, square)


def test_nested_squares_boundaries_do_not_cross(square):
    inner_square = create_square(0.5, 0.5, 1)

    assert not is_intersecting(square, inner_square)
    assert not is_intersecting(inner_square, square)


def test_path_crossing_polygon(square):
    path = Path((Point(-1, 1), Point(3, 1)))

    assert intersect(path, square)
    assert intersect(square, path)


def test_closing_edge_takes_part_in_intersection():
    corner_points = (Point(0, 0), Point(2, 0), Point(2, 2))
    probe = Path((Point(0, 1), Point(1, 0.5)))

    assert intersect(Polygon(corner_points), probe)
    assert not intersect(Path(corner_points), probe)


def test_triangle_intersection(square):
    triangle = Triangle.create_by_points(Point(1, 1), Point(4, 1), Point(1, 4))

    assert intersect(triangle, square)
    assert intersect(square, triangle)


def test_bounding_extents():
    path = Path((Point(0, 5), Point(3, -1), Point(-2, 2)))

    extent_x, extent_y = get_bounding_extent_x(path), get_bounding_extent_y(path)

    assert (extent_x.start, extent_x.end) == (-2, 3)
    assert (extent_y.start, extent_y.end) == (-1, 5)


def test_bounding_extent_includes_its_ends(square):
    extent_x = get_bounding_extent_x(square)

    assert 0 in extent_x
    assert 2 in extent_x
    assert 2.5 not in extent_x


def test_bounding_box():
    bounding_box = get_bounding_box(Path((Point(0, 5), Point(3, -1), Point(-2, 2))))

    assert bounding_box == BoundingBox(-2, -1, 3, 5)
    assert bounding_box.width == 5
    assert bounding_box.height == 6


def test_bounding_box_follows_translation(square):
    square.translate(Vector(-1, 3))

    assert get_bounding_box(square) == BoundingBox(-1, 3, 1, 5)


def test_bounding_extent_of_empty_figure():
    with pytest.raises(EmptyFigureError) as error_info:
        get_bounding_extent_y(Path(tuple()))

    assert isinstance(error_info.value, DegenerateInputError)


def test_paths_sharing_vertex_ignore_argument_order():
    shared_point = Point(8.028549152229672, -9.388200339328929)
    first_path = Path((Point(-9.491082780130784, 0.8282494558699316), shared_point))
    second_path = Path((shared_point, Point(8.782983255570212, -2.375915246235751)))

    assert intersect(first_path, second_path) == intersect(second_path, first_path)


def test_polygons_sharing_vertex_ignore_argument_order():
    shared_point = Point(1.3, 2.7)
    first_triangle = Triangle.create_by_points(Point(-4.1, 0.2), Point(-0.7, 5.9), shared_point)
    second_triangle = Triangle.create_by_points(shared_point, Point(6.4, 3.3), Point(3.8, -2.6))

    assert intersect(first_triangle, second_triangle) == intersect(second_triangle, first_triangle)
