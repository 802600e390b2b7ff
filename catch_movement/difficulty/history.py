import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DifficultyHitObject:
    """
    Timing shared by every mode's difficulty object.

    Times are divided by the clock rate, so a 1.5x rate shortens every
    interval.
    """
    base_object: Any
    last_object: Any
    index: int
    start_time: float
    end_time: float
    delta_time: float

    @classmethod
    def create(cls, hit_object, last_object, clock_rate: float, index: int) -> "DifficultyHitObject":
        if clock_rate <= 0:
            raise ValueError(f"clock_rate must be positive, got {clock_rate}")

        start_time = hit_object.start_time / clock_rate
        end_time = getattr(hit_object, "end_time", hit_object.start_time) / clock_rate
        delta_time = (hit_object.start_time - last_object.start_time) / clock_rate

        return cls(
            base_object=hit_object,
            last_object=last_object,
            index=index,
            start_time=start_time,
            end_time=end_time,
            delta_time=delta_time,
        )


class DifficultyObjectHistory(Generic[T]):
    """
    Append-only, time ordered sequence of finished difficulty objects.

    New objects are only added through build(), which hands the factory
    this history and the index the object will take. At that point the
    history holds exactly indices 0..index-1, so an object can never see
    itself or anything after it.
    """

    def __init__(self):
        self._objects: List[T] = []

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index):
        return self._objects[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._objects)

    def previous(self, index: int, backwards_index: int = 0) -> Optional[T]:
        i = index - (backwards_index + 1)
        if 0 <= i < len(self._objects):
            return self._objects[i]
        return None

    def next(self, index: int, forwards_index: int = 0) -> Optional[T]:
        i = index + forwards_index + 1
        if 0 <= i < len(self._objects):
            return self._objects[i]
        return None

    def build(self, factory: Callable[["DifficultyObjectHistory[T]", int], T]) -> T:
        index = len(self._objects)
        obj = factory(self, index)

        if self._objects:
            last = self._objects[-1]
            if obj.start_time < last.start_time:
                logger.warning("refusing object %d: starts before object %d", index, index - 1)
                raise ValueError(
                    f"object {index} starts at {obj.start_time} before previous object at {last.start_time}"
                )

        self._objects.append(obj)
        return obj
