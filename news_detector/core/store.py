"""
In-memory analysis state.

One current AnalysisResult plus an append-only (except clear) history.
Every read returns a deep copy, so callers never hold a reference into the
store; the mutating methods below are the only writers.
"""
from datetime import datetime, timezone
from .models import AnalysisResult, HistoryEntry, Label

class AnalysisStore:
    def __init__(self):
        self._current = AnalysisResult.unset()
        self._history: list[HistoryEntry] = []

    def get_current_state(self) -> AnalysisResult:
        return self._current.model_copy(deep=True)

    def get_history(self) -> list[HistoryEntry]:
        return [entry.model_copy(deep=True) for entry in self._history]

    def set_loading(self, is_loading: bool) -> None:
        # label/confidence keep the prior values while loading
        self._current = self._current.model_copy(update={"is_loading": is_loading})

    def set_result(self, label: Label, confidence: int) -> None:
        self._current = AnalysisResult(label=label, confidence=confidence, is_loading=False)

    def reset(self) -> None:
        self._current = AnalysisResult.unset()

    def append_history(self, text: str, result: AnalysisResult) -> HistoryEntry:
        entry = HistoryEntry(
            text=text,
            submitted_at=datetime.now(timezone.utc),
            result=result.model_copy(deep=True),
        )
        self._history.append(entry)
        return entry.model_copy(deep=True)

    def clear_history(self) -> None:
        self._history = []
