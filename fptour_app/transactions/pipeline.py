"""
Composable query stages over sequences.

Every stage factory returns a one-argument function, so stages chain with
pipe(), compose() or a Pipeline. Stages never mutate their input; sequence
results come back as new tuples in input order unless the stage sorts.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from ..errors import EmptyAggregateError, NotFoundError
from ..logging.config import get_pipeline_logger, log_pipeline_step
from ..utils.functional import compose, pipe

logger = get_pipeline_logger(__name__)

Stage = Callable[[Iterable[Any]], Any]
Predicate = Callable[[Any], bool]
Selector = Callable[[Any], Any]

__all__ = [
    "Pipeline",
    "average_by",
    "compose",
    "count",
    "find",
    "group_totals",
    "pipe",
    "select",
    "sort_by",
    "sort_by_descending",
    "sum_by",
    "take",
    "try_find",
    "where",
]


def _stage(name: str, fn: Stage) -> Stage:
    fn.__name__ = name
    fn.__qualname__ = name
    return fn


def find(predicate: Predicate, description: Optional[str] = None) -> Stage:
    """
    First element matching predicate.

    Raises:
        NotFoundError: If no element matches
    """
    def stage(items: Iterable[Any]) -> Any:
        searched = 0
        for item in items:
            searched += 1
            if predicate(item):
                return item
        raise NotFoundError(
            f"No element matches {description or 'predicate'}",
            description=description,
            searched_count=searched
        )
    return _stage("find", stage)


def try_find(predicate: Predicate) -> Stage:
    """First element matching predicate, or None."""
    def stage(items: Iterable[Any]) -> Optional[Any]:
        return next((item for item in items if predicate(item)), None)
    return _stage("try_find", stage)


def where(predicate: Predicate) -> Stage:
    """All elements matching predicate, order preserved."""
    def stage(items: Iterable[Any]) -> tuple:
        return tuple(item for item in items if predicate(item))
    return _stage("where", stage)


def select(transform: Selector) -> Stage:
    """One transformed value per element, order preserved."""
    def stage(items: Iterable[Any]) -> tuple:
        return tuple(transform(item) for item in items)
    return _stage("select", stage)


def sum_by(selector: Selector, start: Any = 0) -> Stage:
    """Sum of selector over the elements; start for empty input."""
    def stage(items: Iterable[Any]) -> Any:
        return sum((selector(item) for item in items), start)
    return _stage("sum_by", stage)


def average_by(selector: Selector) -> Stage:
    """
    Mean of selector over the elements.

    Raises:
        EmptyAggregateError: If there are no elements
    """
    def stage(items: Iterable[Any]) -> Any:
        values = [selector(item) for item in items]
        if not values:
            raise EmptyAggregateError("Cannot average an empty sequence", aggregate="average_by")
        return sum(values[1:], values[0]) / len(values)
    return _stage("average_by", stage)


def sort_by(selector: Selector) -> Stage:
    """Stable ascending sort by key."""
    def stage(items: Iterable[Any]) -> tuple:
        return tuple(sorted(items, key=selector))
    return _stage("sort_by", stage)


def sort_by_descending(selector: Selector) -> Stage:
    """Stable descending sort by key; equal keys keep their input order."""
    def stage(items: Iterable[Any]) -> tuple:
        # reverse=True keeps ties in input order
        return tuple(sorted(items, key=selector, reverse=True))
    return _stage("sort_by_descending", stage)


def group_totals(key: Selector, selector: Selector, start: Any = 0) -> Stage:
    """Sum of selector per key, keys in first-seen order."""
    def stage(items: Iterable[Any]) -> dict:
        totals: dict = {}
        for item in items:
            group = key(item)
            totals[group] = totals.get(group, start) + selector(item)
        return totals
    return _stage("group_totals", stage)


def count() -> Stage:
    """Number of elements."""
    def stage(items: Iterable[Any]) -> int:
        return sum(1 for _ in items)
    return _stage("count", stage)


def take(n: int) -> Stage:
    """First n elements (fewer if the input is shorter)."""
    if n < 0:
        raise ValueError(f"take() needs a non-negative count, got {n}")

    def stage(items: Iterable[Any]) -> tuple:
        return tuple(item for _, item in zip(range(n), items))
    return _stage("take", stage)


@dataclass(frozen=True)
class Pipeline:
    """
    Immutable ordered chain of stages.

    then() returns a new pipeline; nested pipelines are flattened so that
    (a.then(b)).then(c) and a.then(b.then(c)) hold identical stage tuples.
    """
    stages: tuple = ()
    name: str = "pipeline"

    @classmethod
    def of(cls, *stages: Stage, name: str = "pipeline") -> "Pipeline":
        """Create a pipeline from stages."""
        return cls(name=name).then(*stages)

    def then(self, *stages: Any) -> "Pipeline":
        """Append stages (or the stages of other pipelines)."""
        flat = list(self.stages)
        for stage in stages:
            if isinstance(stage, Pipeline):
                flat.extend(stage.stages)
            else:
                flat.append(stage)
        return Pipeline(stages=tuple(flat), name=self.name)

    def __rshift__(self, stage: Any) -> "Pipeline":
        return self.then(stage)

    def __call__(self, items: Iterable[Any]) -> Any:
        value: Any = items
        for stage in self.stages:
            input_count = len(value) if hasattr(value, "__len__") else -1
            value = stage(value)
            log_pipeline_step(
                logger,
                getattr(stage, "__name__", repr(stage)),
                input_count,
                value,
                context={"pipeline": self.name}
            )
        return value
