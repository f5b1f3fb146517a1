"""Display state and the single update function applied per user action.

DisplayState is immutable; every action produces a new state through
update(). submit_search() drives one complete search through the pipeline.
"""

import logging
from dataclasses import dataclass, replace

from weatherview.config.schema import AppConfig, ThemeMode
from weatherview.display.themes import toggle_mode
from weatherview.models.weather import (
    CurrentConditions,
    DailySummary,
    SearchFailure,
    SearchResult,
)
from weatherview.pipeline.search_pipeline import SearchPipeline, sanitize_city

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayState:
    city_input: str = ""
    current: CurrentConditions | None = None
    daily: tuple[DailySummary, ...] = ()
    utc_offset_seconds: int = 0
    loading: bool = False
    error: str = ""
    theme_name: str = "Classic"
    mode: ThemeMode = ThemeMode.LIGHT
    theme_names: tuple[str, ...] = ()
    search_seq: int = 0


@dataclass(frozen=True)
class EditCity:
    text: str


@dataclass(frozen=True)
class SearchStarted:
    pass


@dataclass(frozen=True)
class SearchSucceeded:
    seq: int
    result: SearchResult


@dataclass(frozen=True)
class SearchFailed:
    seq: int
    message: str


@dataclass(frozen=True)
class SelectTheme:
    name: str


@dataclass(frozen=True)
class ToggleMode:
    pass


Action = EditCity | SearchStarted | SearchSucceeded | SearchFailed | SelectTheme | ToggleMode


def initial_state(config: AppConfig) -> DisplayState:
    return DisplayState(
        theme_name=config.display.default_theme,
        mode=config.display.default_mode,
        theme_names=tuple(t.name for t in config.themes),
    )


def update(state: DisplayState, action: Action) -> DisplayState:
    """Apply one action. Results from a superseded search are ignored."""
    if isinstance(action, EditCity):
        return replace(state, city_input=action.text)

    if isinstance(action, SearchStarted):
        return replace(
            state, loading=True, error="", search_seq=state.search_seq + 1
        )

    if isinstance(action, SearchSucceeded):
        if action.seq != state.search_seq:
            logger.debug("Dropping stale search result seq=%d", action.seq)
            return state
        return replace(
            state,
            current=action.result.current,
            daily=action.result.daily,
            utc_offset_seconds=action.result.utc_offset_seconds,
            loading=False,
            error="",
        )

    if isinstance(action, SearchFailed):
        if action.seq != state.search_seq:
            logger.debug("Dropping stale search failure seq=%d", action.seq)
            return state
        return replace(
            state,
            current=None,
            daily=(),
            utc_offset_seconds=0,
            loading=False,
            error=action.message,
        )

    if isinstance(action, SelectTheme):
        if state.theme_names and action.name not in state.theme_names:
            return state
        return replace(state, theme_name=action.name)

    if isinstance(action, ToggleMode):
        return replace(state, mode=toggle_mode(state.mode))

    raise TypeError(f"Unknown action: {action!r}")


async def submit_search(state: DisplayState, pipeline: SearchPipeline) -> DisplayState:
    """Run a search for state.city_input and return the settled state.

    Blank input or a search already in flight leaves the state untouched
    and issues no request.
    """
    city = sanitize_city(state.city_input)
    if not city or state.loading:
        return state

    state = update(state, SearchStarted())
    seq = state.search_seq
    outcome = await pipeline.search(city)
    if isinstance(outcome, SearchFailure):
        return update(state, SearchFailed(seq=seq, message=outcome.message))
    return update(state, SearchSucceeded(seq=seq, result=outcome))
