from abc import ABC, abstractmethod


class ITranslatable(ABC):
    @abstractmethod
    def translate(self, vector: 'Vector') -> None:
        pass


class IRotatable(ABC):
    @abstractmethod
    def rotate(self, center: 'Point', angle: int | float) -> None:
        pass


class IFigure(ABC):
    @property
    @abstractmethod
    def vertices(self) -> tuple['Point', ]:
        pass

    @property
    @abstractmethod
    def sides(self) -> tuple['Segment', ]:
        pass
