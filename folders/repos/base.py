from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepo(Generic[ModelType]):
    """Read-only repository over an already loaded, ordered model collection."""

    def __init__(self, load_all: Callable[[], Sequence[ModelType]]) -> None:
        self._load_all = load_all

    def all(self) -> Sequence[ModelType]:
        """Return every model, in collection order."""
        return self._load_all()

    def iter_where(self, predicate: Callable[[ModelType], bool]) -> Iterator[ModelType]:
        """Lazily yield the models matching ``predicate``, in collection order."""
        return (model for model in self.all() if predicate(model))
