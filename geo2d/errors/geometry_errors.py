from enum import Enum


class GeometryErrorKind(Enum):
    degenerate_input = 'degenerate input'
    parallel_lines = 'parallel lines'


class GeometryError(Exception):
    kind: GeometryErrorKind


class DegenerateInputError(GeometryError):
    kind = GeometryErrorKind.degenerate_input


class LineError(GeometryError):
    pass


class VerticalLineError(LineError, DegenerateInputError):
    pass


class ParallelLinesError(LineError):
    kind = GeometryErrorKind.parallel_lines


class FigureError(GeometryError):
    pass


class FigureIsNotCorrect(FigureError, DegenerateInputError):
    pass


class NotEnoughVerticesError(FigureIsNotCorrect):
    pass


class InvalidTriangleError(FigureIsNotCorrect):
    pass


class EmptyFigureError(FigureIsNotCorrect):
    pass
