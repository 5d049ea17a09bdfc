import logging
from math import acos, cos, sin, pi, copysign
from typing import Iterable, Iterator, Self

from beautiful_repr import StylizedMixin, Field, TemplateFormatter, parse_length

from geo2d.interfaces import IFigure, ITranslatable, IRotatable
from geo2d.errors.geometry_errors import *
from geo2d.geometry import Point, Vector, Segment
from geo2d.tools import Report, ReportAnalyzer, BadReportHandler, StrictToStateMixin


logger = logging.getLogger(__name__)


class Path(StylizedMixin, IFigure, ITranslatable, IRotatable):
    _repr_fields = (
        Field(
            'vertices',
            value_getter=parse_length,
            formatter=TemplateFormatter("{value} vertices")
        ),
    )
    _segment_factory: type = Segment

    def __init__(self, points: Iterable[Point, ]):
        self._vertices = [point.copy() for point in points]

    @property
    def vertices(self) -> tuple[Point, ]:
        return tuple(self._vertices)

    @property
    def sides(self) -> tuple[Segment, ]:
        return tuple(
            self._segment_factory(self._vertices[vertex_index], self._vertices[vertex_index + 1])
            for vertex_index in range(len(self._vertices) - 1)
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def translate(self, vector: Vector) -> None:
        for vertex in self._vertices:
            vertex.translate(vector)

    def rotate(self, center: Point, angle: int | float) -> None:
        for vertex in self._vertices:
            vertex.rotate(center, angle)


class Polygon(StrictToStateMixin, StylizedMixin, IFigure, ITranslatable, IRotatable):
    _repr_fields = (
        Field(
            'vertices',
            value_getter=parse_length,
            formatter=TemplateFormatter("{value} vertices")
        ),
    )
    _segment_factory: type = Segment
    _minimum_number_of_vertices: int = 3
    _state_report_analyzer = ReportAnalyzer(
        (BadReportHandler(NotEnoughVerticesError, "Polygon not viable"), )
    )

    def __init__(self, points: Iterable[Point, ]):
        self._vertices = [point.copy() for point in points]
        self._check_state_errors()

    @property
    def vertices(self) -> tuple[Point, ]:
        return tuple(self._vertices)

    @property
    def sides(self) -> tuple[Segment, ]:
        return tuple(
            self._segment_factory(
                self._vertices[vertex_index],
                self._vertices[(vertex_index + 1) % len(self._vertices)]
            )
            for vertex_index in range(len(self._vertices))
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def translate(self, vector: Vector) -> None:
        for vertex in self._vertices:
            vertex.translate(vector)

    def rotate(self, center: Point, angle: int | float) -> None:
        for vertex in self._vertices:
            vertex.rotate(center, angle)

    def _is_correct(self) -> Report:
        if len(self._vertices) < self._minimum_number_of_vertices:
            return Report.create_error_report(NotEnoughVerticesError(
                f"{self.__class__.__name__} must contain at least {self._minimum_number_of_vertices} vertices, not {len(self._vertices)}"
            ))
        else:
            return Report(True)

    @classmethod
    def create_regular_by_radius(
        cls,
        center: Point,
        radius: int | float,
        number_of_vertices: int
    ) -> Self:
        return cls(
            Point(
                center.x + radius*cos(2*pi*vertex_index / number_of_vertices),
                center.y + radius*sin(2*pi*vertex_index / number_of_vertices)
            )
            for vertex_index in range(number_of_vertices)
        )

    @classmethod
    def create_regular(cls, center: Point, vertex: Point, number_of_vertices: int) -> Self:
        polygon = cls.create_regular_by_radius(
            center,
            center.get_distance_to(vertex),
            number_of_vertices
        )
        first_vertex = polygon.vertices[0]

        try:
            rotation_angle = Triangle.create_by_points(first_vertex, vertex, center).angles[0]
        except InvalidTriangleError:
            logger.debug(
                "Regular polygon around %r already starts at %r, alignment skipped",
                center,
                vertex
            )
            return polygon

        polygon.rotate(center, copysign(rotation_angle, vertex.y - center.y))

        return polygon


class Triangle(StrictToStateMixin, StylizedMixin, IFigure, ITranslatable, IRotatable):
    _repr_fields = (Field('vertices', formatter=TemplateFormatter("{value}")), )
    _polygon_factory: type = Polygon
    _state_report_analyzer = ReportAnalyzer(
        (BadReportHandler(InvalidTriangleError, "Triangle not viable"), )
    )

    def __init__(self, points: Iterable[Point, ]):
        self._polygon = self._polygon_factory(points)
        self._check_state_errors()

    @property
    def polygon(self) -> Polygon:
        return self._polygon

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return self._polygon.vertices

    @property
    def sides(self) -> tuple[Segment, Segment, Segment]:
        return self._polygon.sides

    @property
    def angles(self) -> tuple[float, float, float]:
        return self.get_angles()

    def translate(self, vector: Vector) -> None:
        self._polygon.translate(vector)

    def rotate(self, center: Point, angle: int | float) -> None:
        self._polygon.rotate(center, angle)

    def get_angles(self) -> tuple[float, float, float]:
        self._check_state_errors()
        self._state_report_analyzer(self._get_vertex_coincidence_report())

        first_length, second_length, third_length = (side.length for side in self.sides)

        return (
            self._get_angle_opposite(first_length, second_length, third_length),
            self._get_angle_opposite(second_length, first_length, third_length),
            self._get_angle_opposite(third_length, first_length, second_length)
        )

    def _is_correct(self) -> Report:
        if len(self._polygon) != 3:
            return Report.create_error_report(InvalidTriangleError(
                f"Triangle must contain 3 vertices, not {len(self._polygon)}"
            ))
        else:
            return Report(True)

    def _get_vertex_coincidence_report(self) -> Report:
        vertices = self.vertices

        for first_index in range(len(vertices)):
            for second_index in range(first_index + 1, len(vertices)):
                if vertices[first_index] == vertices[second_index]:
                    return Report.create_error_report(InvalidTriangleError(
                        f"Triangle vertices {first_index} and {second_index} coincide at {vertices[first_index]}"
                    ))

        return Report(True)

    @staticmethod
    def _get_angle_opposite(
        opposite_length: float,
        first_adjacent_length: float,
        second_adjacent_length: float
    ) -> float:
        cosine = (
            (first_adjacent_length**2 + second_adjacent_length**2 - opposite_length**2)
            / (2*first_adjacent_length*second_adjacent_length)
        )

        return acos(min(1., max(-1., cosine)))

    @classmethod
    def create_by_points(cls, first_point: Point, second_point: Point, third_point: Point) -> Self:
        return cls((first_point, second_point, third_point))
