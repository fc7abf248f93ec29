"""
Analysis request lifecycle.

submit() is the only path that produces a verdict:
1. Mark loading and notify
2. Simulated latency (placeholder for a real inference call)
3. Classify
4. Write the verdict, append a history snapshot, notify

Any failure on the way is caught here and never reaches the caller: loading is
cleared, the previous label/confidence stay in place and history is untouched.
"""
import asyncio
import inspect
from typing import Callable, List, Optional
from .models import AnalysisResult, ClassifierResult, HistoryEntry
from .store import AnalysisStore
from .classifier import classify
from .config import get_latency_s

StateListener = Callable[[AnalysisResult], None]

class AnalysisOrchestrator:
    def __init__(
        self,
        store: AnalysisStore,
        latency_s: Optional[float] = None,
        classifier: Callable[[str], ClassifierResult] = classify,
        on_state_change: Optional[StateListener] = None,
        verbose: bool = False,
    ):
        self.store = store
        self.latency_s = get_latency_s() if latency_s is None else latency_s
        self.classifier = classifier
        self.verbose = verbose
        self._listeners: List[StateListener] = []
        if on_state_change is not None:
            self.subscribe(on_state_change)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state-change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit(self, text: str, verbose: bool = False) -> None:
        if not text.strip():
            return

        trace = []
        if self.verbose or verbose:
            trace.append(f"[TRACE] Input: \"{text}\"")

        before = self.store.get_current_state()
        self.store.set_loading(True)

        try:
            self._notify()
            await asyncio.sleep(self.latency_s)

            verdict = self.classifier(text)
            if inspect.isawaitable(verdict):
                verdict = await verdict

            if trace:
                trace.append(
                    f"[TRACE] 1. Classifier: label={verdict.label.value}, "
                    f"fake_score={verdict.fake_score}, real_score={verdict.real_score}"
                )
                trace.append(f"[TRACE]   - trigger_spans: {verdict.trigger_spans}")

            self.store.set_result(verdict.label, verdict.confidence)
            self.store.append_history(text, self.store.get_current_state())

            if trace:
                trace.append(f"[TRACE] 2. Result: {verdict.label.value} ({verdict.confidence}%)")
        except Exception as e:
            print(f"[ERROR] Analysis failed: {e}")
            if trace:
                trace.append(f"[TRACE] FAILED: kept previous result label={before.label.value}")
            # Back to the pre-call result with loading cleared
            self.store.set_result(before.label, before.confidence)

        if trace:
            print("\n".join(trace))
        self._notify()

    def reset(self) -> bool:
        """Clear the current result. Ignored while an analysis is in flight; returns whether it ran."""
        if self.store.get_current_state().is_loading:
            return False
        self.store.reset()
        self._notify()
        return True

    def get_current_state(self) -> AnalysisResult:
        return self.store.get_current_state()

    def get_history(self) -> List[HistoryEntry]:
        return self.store.get_history()

    def clear_history(self) -> None:
        self.store.clear_history()

    def _notify(self) -> None:
        # One failing listener must not starve the others
        for listener in list(self._listeners):
            try:
                listener(self.store.get_current_state())
            except Exception as e:
                print(f"[ERROR] State listener failed: {e}")
