from pydantic import BaseModel, Field
from datetime import datetime
from enum import Enum

class Label(str, Enum):
    REAL = "REAL"
    FAKE = "FAKE"
    UNSET = "UNSET"

class AnalysisResult(BaseModel):
    label: Label = Label.UNSET
    # Only meaningful when label != UNSET
    confidence: int = Field(0, ge=0, le=100)
    is_loading: bool = False

    @classmethod
    def unset(cls) -> "AnalysisResult":
        return cls(label=Label.UNSET, confidence=0, is_loading=False)

class HistoryEntry(BaseModel):
    text: str
    submitted_at: datetime
    # Copied at append time, never a live reference to the current result
    result: AnalysisResult

class ClassifierResult(BaseModel):
    label: Label
    confidence: int = Field(..., ge=65, le=95)
    fake_score: int = Field(0, ge=0)
    real_score: int = Field(0, ge=0)
    trigger_spans: list[str] = Field(default_factory=list)

class AnalyzeRequest(BaseModel):
    text: str = Field(..., max_length=10000, description="News text or headline to analyze")
    verbose: bool = False

class HistoryResponse(BaseModel):
    entries: list[HistoryEntry]
    count: int
