"""TransformPipeline: runs ordered text transforms on a note before conversion."""

from abc import ABC, abstractmethod


class Transform(ABC):
    @abstractmethod
    def apply(self, content: str) -> str:
        """Rewrite raw note text; must leave text it does not recognise untouched."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, content: str) -> str:
        for t in self.transforms:
            content = t.apply(content)
        return content
