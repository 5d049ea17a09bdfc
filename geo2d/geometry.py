import logging
from dataclasses import dataclass
from functools import cached_property
from math import sqrt, cos, sin
from typing import Iterable, Iterator, Self

from beautiful_repr import StylizedMixin, Field

from geo2d.interfaces import ITranslatable, IRotatable
from geo2d.errors.geometry_errors import *
from geo2d.tools import Diapason


logger = logging.getLogger(__name__)


class Point(ITranslatable, IRotatable):
    __hash__ = None

    def __init__(self, x: int | float = 0., y: int | float = 0.):
        self.x = float(x)
        self.y = float(y)

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y})"

    def __eq__(self, other: 'Point') -> bool:
        if not isinstance(other, Point):
            return NotImplemented

        return self.coordinates == other.coordinates

    def __iter__(self) -> Iterator[float]:
        return iter(self.coordinates)

    def rotate(self, center: 'Point', angle: int | float) -> None:
        center_x, center_y = center.coordinates
        shifted_x, shifted_y = self.x - center_x, self.y - center_y

        self.x = shifted_x*cos(angle) - shifted_y*sin(angle) + center_x
        self.y = shifted_x*sin(angle) + shifted_y*cos(angle) + center_y

    def translate(self, vector: 'Vector') -> None:
        self.x += vector.x
        self.y += vector.y

    def get_distance_to(self, point: 'Point') -> float:
        return Vector.create_between(self, point).length

    def copy(self) -> Self:
        return self.__class__(self.x, self.y)

    @classmethod
    def create_by_coordinates(cls, coordinates: Iterable[int | float]) -> Self:
        return cls(*coordinates)


class Vector:
    def __init__(self, x: int | float = 0., y: int | float = 0.):
        self.__x = float(x)
        self.__y = float(y)

    @property
    def x(self) -> float:
        return self.__x

    @property
    def y(self) -> float:
        return self.__y

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.__x, self.__y)

    @cached_property
    def length(self) -> float:
        return sqrt(sum(coordinate**2 for coordinate in self.coordinates))

    def magnitude(self) -> float:
        return self.length

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y})"

    def __hash__(self) -> int:
        return hash(self.coordinates)

    def __eq__(self, other: 'Vector') -> bool:
        if not isinstance(other, Vector):
            return NotImplemented

        return self.coordinates == other.coordinates

    def __add__(self, other: 'Vector') -> 'Vector':
        return self.__class__(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return self + (-other)

    def __mul__(self, number: int | float) -> 'Vector':
        return self.__class__(self.x * number, self.y * number)

    def __rmul__(self, number: int | float) -> 'Vector':
        return self * number

    def __neg__(self) -> 'Vector':
        return self * -1

    @classmethod
    def create_between(cls, start_point: Point, end_point: Point) -> Self:
        return cls(end_point.x - start_point.x, end_point.y - start_point.y)


@dataclass(frozen=True)
class Line:
    slope: float
    y_intercept: float

    def get_y(self, x: int | float) -> float:
        return self.slope*x + self.y_intercept

    def is_parallel_to(self, other: 'Line') -> bool:
        return self.slope == other.slope

    def get_intersection_with(self, other: 'Line') -> Point:
        if self.is_parallel_to(other):
            raise ParallelLinesError(f"Lines {self} and {other} do not intersect")

        x = (other.y_intercept - self.y_intercept) / (self.slope - other.slope)

        return Point(x, self.get_y(x))

    @classmethod
    def create_by_points(cls, first_point: Point, second_point: Point) -> Self:
        if first_point.x == second_point.x:
            raise VerticalLineError(
                f"Line through {first_point} and {second_point} is vertical and has no slope"
            )

        slope = (second_point.y - first_point.y) / (second_point.x - first_point.x)

        return cls(slope, first_point.y - slope*first_point.x)


class Segment(StylizedMixin, ITranslatable, IRotatable):
    _repr_fields = (
        Field(
            value_getter=lambda segment, _: (segment.first_point, segment.second_point),
            formatter=lambda values, _: f"between {values[0]} and {values[1]}"
        ),
    )
    _line_factory: type = Line

    def __init__(self, first_point: Point, second_point: Point):
        self.__first_point = first_point.copy()
        self.__second_point = second_point.copy()

    @property
    def first_point(self) -> Point:
        return self.__first_point

    @property
    def second_point(self) -> Point:
        return self.__second_point

    @property
    def points(self) -> tuple[Point, Point]:
        return (self.__first_point, self.__second_point)

    @property
    def vector(self) -> Vector:
        return Vector.create_between(self.__first_point, self.__second_point)

    @property
    def length(self) -> float:
        return self.magnitude()

    @property
    def is_vertical(self) -> bool:
        return self.__first_point.x == self.__second_point.x

    @property
    def line(self) -> Line:
        return self._line_factory.create_by_points(self.__first_point, self.__second_point)

    def magnitude(self) -> float:
        return self.vector.length

    def translate(self, vector: Vector) -> None:
        for point in self.points:
            point.translate(vector)

    def rotate(self, center: Point, angle: int | float) -> None:
        for point in self.points:
            point.rotate(center, angle)

    def intersect(self, other: 'Segment') -> bool:
        return self.is_intersecting(other)

    def is_intersecting(self, other: 'Segment') -> bool:
        return self.get_intersection_with(other) is not None

    def get_intersection_with(self, other: 'Segment') -> Point | None:
        try:
            x = self._get_crossing_x_with(other)
        except ParallelLinesError:
            logger.debug("Segments %r and %r are parallel", self, other)
            return None

        if not (
            self.is_having_in_bounds(Point(x, self._get_crossing_y_at(x, other)))
            and other.is_having_in_bounds(Point(x, other._get_crossing_y_at(x, self)))
        ):
            return None

        ordinate_line = min(
            (segment.line for segment in (self, other) if not segment.is_vertical),
            key=lambda line: (line.slope != 0, line.slope, line.y_intercept)
        )

        return Point(x, ordinate_line.get_y(x))

    def is_having_in_bounds(self, point: Point) -> bool:
        return (
            point.x in Diapason(self.__first_point.x, self.__second_point.x)
            and point.y in Diapason(self.__first_point.y, self.__second_point.y)
        )

    def _get_crossing_x_with(self, other: 'Segment') -> float:
        if self.is_vertical and other.is_vertical:
            raise ParallelLinesError(f"Vertical segments {self} and {other} do not intersect")
        elif self.is_vertical or other.is_vertical:
            return (self if self.is_vertical else other).first_point.x

        return self.line.get_intersection_with(other.line).x

    def _get_crossing_y_at(self, x: float, other: 'Segment') -> float:
        return (other if self.is_vertical else self).line.get_y(x)
