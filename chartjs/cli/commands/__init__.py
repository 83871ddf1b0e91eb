from typing import Any, Callable, Dict, Iterable, List, Protocol, TextIO, TypeVar


class CommandHandler(Protocol):
    def __call__(self, out: TextIO, args: List[str], opts: Dict[str, Any]) -> int: ...


_REGISTRY: Dict[str, CommandHandler] = {}


def register(name: str, handler: CommandHandler) -> None:
    _REGISTRY[name] = handler


def get(name: str) -> CommandHandler | None:
    return _REGISTRY.get(name)


def names() -> Iterable[str]:
    return _REGISTRY.keys()


F = TypeVar("F", bound=Callable[..., int])


def command(name: str) -> Callable[[F], F]:
    def _decorator(fn: F) -> F:
        register(name, fn)
        return fn

    return _decorator


from . import core as _core  # noqa: E402
from . import demo as _demo  # noqa: E402

_ = (_core, _demo)
