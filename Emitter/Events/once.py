"""
Wait for a single emission as a Future.

`once(emitter, "ready")` resolves with the list of arguments of the next
`ready` emission, or fails with the error of the next `error` emission,
whichever comes first. The losing listener is removed either way, so a later
unrelated `error` cannot touch an already settled future.

Asyncio code can await the result with `asyncio.wrap_future(...)`.
"""
from concurrent.futures import Future
from typing import Any, List
import logging

from Emitter.Events.event_emitter import ERROR, EventEmitter, EventName
from Emitter.Exception.EmitterError import EmitterError

logger = logging.getLogger(__name__)


def once(emitter: EventEmitter, event_name: EventName) -> "Future[List[Any]]":
    future: "Future[List[Any]]" = Future()

    def resolver(*args: Any) -> None:
        if event_name != ERROR:
            emitter.remove_listener(ERROR, rejecter)
        if not future.done():
            future.set_result(list(args))

    def rejecter(err: Any = None, *args: Any) -> None:
        emitter.remove_listener(event_name, resolver)
        if future.done():
            return
        if not isinstance(err, BaseException):
            err = EmitterError(f"Unhandled error. ({err!r})")
        logger.debug("once(%r) rejected: %s", event_name, err)
        future.set_exception(err)

    emitter.once(event_name, resolver)
    if event_name != ERROR:
        emitter.once(ERROR, rejecter)
    return future
