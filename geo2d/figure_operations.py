from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Self

from geo2d.interfaces import IFigure
from geo2d.errors.geometry_errors import EmptyFigureError
from geo2d.geometry import Point
from geo2d.tools import Diapason


def is_intersecting(first_figure: IFigure, second_figure: IFigure) -> bool:
    second_figure_sides = second_figure.sides

    return any(
        first_side.is_intersecting(second_side)
        for first_side in first_figure.sides
        for second_side in second_figure_sides
    )


def intersect(first_figure: IFigure, second_figure: IFigure) -> bool:
    return is_intersecting(first_figure, second_figure)


def get_bounding_extent_x(figure: IFigure) -> Diapason:
    return _get_bounding_extent_by(attrgetter('x'), figure)


def get_bounding_extent_y(figure: IFigure) -> Diapason:
    return _get_bounding_extent_by(attrgetter('y'), figure)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def create_by_figure(cls, figure: IFigure) -> Self:
        extent_x, extent_y = get_bounding_extent_x(figure), get_bounding_extent_y(figure)

        return cls(extent_x.start, extent_y.start, extent_x.end, extent_y.end)


def get_bounding_box(figure: IFigure) -> BoundingBox:
    return BoundingBox.create_by_figure(figure)


def _get_bounding_extent_by(
    coordinate_getter: Callable[[Point], float],
    figure: IFigure
) -> Diapason:
    vertices = figure.vertices

    if len(vertices) == 0:
        raise EmptyFigureError(f"Figure {figure} has no vertices to bound")

    lowest_coordinate = highest_coordinate = coordinate_getter(vertices[0])

    for vertex in vertices[1:]:
        coordinate = coordinate_getter(vertex)

        if coordinate < lowest_coordinate:
            lowest_coordinate = coordinate
        elif coordinate > highest_coordinate:
            highest_coordinate = coordinate

    return Diapason(lowest_coordinate, highest_coordinate)
