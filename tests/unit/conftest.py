"""
Unit Test Fixtures.

Deterministic stand-ins for the note store's collaborators: a stepping
clock, sequential ids and a scripted confirmation prompt. Unit tests never
wait on a terminal prompt or depend on wall-clock time.
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from todonotes.core.utils import CounterIdGenerator
from todonotes.services.note import NoteStore
from todonotes.services.search import SearchableNoteStore
from todonotes.services.sort import SortableNoteStore

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


# =============================================================================
# Collaborator Fakes
# =============================================================================


class FakeClock:
    """Clock that advances by a fixed step on every call."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)) -> None:
        self.start = start
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        self.calls += 1
        return now


class ScriptedPrompt:
    """
    Confirmation prompt with canned answers.

    Answers are consumed in order; once exhausted, ``default`` is returned.
    Every message asked is recorded in ``messages``.
    """

    def __init__(self, *answers: bool, default: bool = True) -> None:
        self.answers = list(answers)
        self.default = default
        self.messages: list[str] = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        if self.answers:
            return self.answers.pop(0)
        return self.default


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at 2026-01-01 12:00:00, one second per call."""
    return FakeClock()


@pytest.fixture
def id_generator() -> CounterIdGenerator:
    """Sequential ids: note-1, note-2, ..."""
    return CounterIdGenerator(prefix="note-")


@pytest.fixture
def prompt() -> ScriptedPrompt:
    """Prompt that accepts every change unless told otherwise."""
    return ScriptedPrompt(default=True)


@pytest.fixture
def scripted_prompt() -> type[ScriptedPrompt]:
    """Provide ScriptedPrompt class for building prompts with custom answers."""
    return ScriptedPrompt


@pytest.fixture
def fake_clock() -> type[FakeClock]:
    """Provide FakeClock class for building clocks with custom timing."""
    return FakeClock


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def note_store(id_generator, clock, prompt) -> NoteStore:
    """Empty base store wired with the fakes."""
    return NoteStore(id_generator=id_generator, clock=clock, confirm=prompt)


@pytest.fixture
def searchable_store(id_generator, clock, prompt) -> SearchableNoteStore:
    """Empty searchable store wired with the fakes."""
    return SearchableNoteStore(id_generator=id_generator, clock=clock, confirm=prompt)


@pytest.fixture
def sortable_store(id_generator, clock, prompt) -> SortableNoteStore:
    """Empty sortable store wired with the fakes."""
    return SortableNoteStore(id_generator=id_generator, clock=clock, confirm=prompt)


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(note_store, mock_logger):
            note_store._logger = mock_logger
            note_store.create_note(...)
            mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger
