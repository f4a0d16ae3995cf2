"""Runs fetches and the liveness timer off the event loop's critical path.

Each request becomes an asyncio task that runs the blocking data source call
in a worker thread and, when it finishes, posts exactly one event back
through ``post``. Requests are tagged with a per-slot generation; a result is
only posted if no newer request (or invalidation) happened for its slot in
the meantime, so a slow response can never overwrite a newer one.
"""

import asyncio
import logging
from typing import Callable

from sportsterm.errors import FetchFailure, TimedOut
from sportsterm.espn import DataSource
from sportsterm.navigator import DETAIL_SLOT, LIST_SLOT, DetailLoaded, Event, ListLoaded, Tick

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 30.0
DEFAULT_FETCH_TIMEOUT = 10.0


class RefreshScheduler:
    def __init__(
        self,
        source: DataSource,
        post: Callable[[Event], None],
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ):
        self.source = source
        self.post = post
        self.timeout = timeout
        self.tick_interval = tick_interval
        self._generations = {LIST_SLOT: 0, DETAIL_SLOT: 0}
        self._tasks: set[asyncio.Task] = set()

    def generation(self, slot: str) -> int:
        return self._generations[slot]

    def invalidate(self, slot: str) -> int:
        """Forget every outstanding request for ``slot``."""
        self._generations[slot] += 1
        return self._generations[slot]

    def request_list(self, sport_id: str, league_id: str, upcoming: bool = False) -> int:
        generation = self.invalidate(LIST_SLOT)
        self._spawn(
            self._run(
                LIST_SLOT,
                generation,
                lambda: self.source.list_games(sport_id, league_id, upcoming),
                lambda games: ListLoaded(games=tuple(games)),
                lambda error: ListLoaded(error=error),
            )
        )
        return generation

    def request_detail(self, sport_id: str, league_id: str, event_id: str) -> int:
        generation = self.invalidate(DETAIL_SLOT)
        self._spawn(
            self._run(
                DETAIL_SLOT,
                generation,
                lambda: self.source.game_detail(sport_id, league_id, event_id),
                lambda detail: DetailLoaded(detail=detail),
                lambda error: DetailLoaded(error=error),
            )
        )
        return generation

    def schedule_tick(self) -> None:
        self._spawn(self._tick())

    def shutdown(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, slot, generation, call, on_success, on_failure) -> None:
        try:
            result = await asyncio.wait_for(asyncio.to_thread(call), self.timeout)
            event = on_success(result)
        except TimeoutError:
            logger.warning("%s fetch timed out after %gs", slot, self.timeout)
            event = on_failure(TimedOut(self.timeout))
        except FetchFailure as e:
            logger.warning("%s fetch failed: %s", slot, e)
            event = on_failure(e)
        except Exception as e:
            logger.exception("%s fetch crashed", slot)
            event = on_failure(FetchFailure(f"unexpected error: {e}"))

        if generation != self._generations[slot]:
            logger.debug(
                "Discarding stale %s result (generation %d, latest %d)", slot, generation, self._generations[slot]
            )
            return
        self.post(event)

    async def _tick(self) -> None:
        await asyncio.sleep(self.tick_interval)
        self.post(Tick())
