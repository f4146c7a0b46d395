"""Protocol definitions for the pagination collaborators."""

from typing import (
    Any,
    Awaitable,
    Callable,
    Coroutine,
    Protocol,
    Sequence,
    TypeVar,
    Union,
)

T_co = TypeVar("T_co", covariant=True)


class FetchMoreItems(Protocol[T_co]):
    """Returns the items belonging to ``page``; may be sync or async."""

    def __call__(
        self, page: int
    ) -> Union[Awaitable[Sequence[T_co]], Sequence[T_co]]: ...


ItemBuilder = Callable[[Any], Any]

Listener = Callable[[], None]


class Scheduler(Protocol):
    def spawn(self, coro: Coroutine[Any, Any, None]) -> None: ...

    def defer(self, callback: Callable[[], None]) -> None: ...

    def cancel_all(self) -> None: ...
