import logging

from geo2d.errors.geometry_errors import *
from geo2d.interfaces import IFigure, ITranslatable, IRotatable
from geo2d.tools import Report, ReportAnalyzer, BadReportHandler, StrictToStateMixin, Diapason
from geo2d.geometry import Point, Vector, Line, Segment
from geo2d.figures import Path, Polygon, Triangle
from geo2d.figure_operations import (
    BoundingBox,
    is_intersecting,
    intersect,
    get_bounding_extent_x,
    get_bounding_extent_y,
    get_bounding_box,
)


logging.getLogger(__name__).addHandler(logging.NullHandler())
