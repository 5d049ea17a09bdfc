from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Self

from beautiful_repr import StylizedMixin, Field


@dataclass
class Report:
    sign: bool
    message: str | None = None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.sign

    @classmethod
    def create_error_report(cls, error: Exception) -> Self:
        return cls(
            False,
            error=error
        )


class ReportHandler(ABC):
    @abstractmethod
    def __call__(self, report: Report) -> None:
        pass

    @abstractmethod
    def is_supported_report(self, report: Report) -> bool:
        pass


class BadReportHandler(ReportHandler):
    def __init__(
        self,
        default_error_type: type,
        default_error_message: str = ''
    ):
        self.default_error_type = default_error_type
        self.default_error_message = default_error_message

    def __call__(self, report: Report) -> None:
        if report.error:
            raise report.error

        raise self.default_error_type(
            report.message if report.message else self.default_error_message
        )

    def is_supported_report(self, report: Report) -> bool:
        return not report.sign


class ReportAnalyzer:
    def __init__(self, report_handlers: Iterable[ReportHandler, ]):
        self.report_handlers = tuple(report_handlers)

    def __call__(self, report: Report) -> None:
        for report_handler in self.report_handlers:
            if report_handler.is_supported_report(report):
                report_handler(report)


class StrictToStateMixin(ABC):
    _state_report_analyzer: ReportAnalyzer

    @abstractmethod
    def _is_correct(self) -> Report:
        pass

    def _check_state_errors(self) -> None:
        self._state_report_analyzer(self._is_correct())


class Diapason(StylizedMixin):
    _repr_fields = Field(
        value_getter=lambda diapason, _: (diapason.start, diapason.end),
        formatter=lambda value, _: ' ~ '.join(map(str, value))
    ),

    def __init__(self, first: float, second: float):
        self._start, self._end = sorted((first, second))

    def __contains__(self, number: float) -> bool:
        return self._start <= number <= self._end

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end
