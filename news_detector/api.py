from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from typing import Optional
from .core.models import AnalysisResult, AnalyzeRequest, HistoryResponse, Label
from .core.orchestrator import AnalysisOrchestrator
from .core.store import AnalysisStore
from .view import render_page

def create_app(orchestrator: Optional[AnalysisOrchestrator] = None) -> FastAPI:
    """
    Build the app around one explicitly owned store + orchestrator.

    Tests pass their own orchestrator (usually with latency_s=0).
    """
    if orchestrator is None:
        orchestrator = AnalysisOrchestrator(AnalysisStore())

    app = FastAPI(title="Fake News Detector")
    app.state.orchestrator = orchestrator

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        state = orchestrator.get_current_state()
        history = orchestrator.get_history()
        # Keep the analyzed text next to its verdict after the page reloads
        text = history[-1].text if history and state.label != Label.UNSET else ""
        return render_page(state, history, text=text)

    @app.post("/analyze", response_model=AnalysisResult)
    async def analyze(req: AnalyzeRequest) -> AnalysisResult:
        """
        Classify text as likely REAL or FAKE.

        - whitespace-only text: no-op, returns the unchanged state
        - 409 while another analysis is in flight
        - analysis failures never surface here; the previous result is returned
        """
        if orchestrator.get_current_state().is_loading:
            raise HTTPException(status_code=409, detail="Analysis already in progress")
        await orchestrator.submit(req.text, verbose=req.verbose)
        return orchestrator.get_current_state()

    @app.post("/reset", response_model=AnalysisResult)
    async def reset() -> AnalysisResult:
        """Clear the current result; 409 while an analysis is in flight."""
        if not orchestrator.reset():
            raise HTTPException(status_code=409, detail="Analysis in progress, cannot reset")
        return orchestrator.get_current_state()

    @app.get("/state", response_model=AnalysisResult)
    async def state() -> AnalysisResult:
        return orchestrator.get_current_state()

    @app.get("/history", response_model=HistoryResponse)
    async def history() -> HistoryResponse:
        entries = orchestrator.get_history()
        return HistoryResponse(entries=entries, count=len(entries))

    @app.delete("/history")
    async def clear_history():
        orchestrator.clear_history()
        return {"status": "ok", "message": "History cleared"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app

app = create_app()
