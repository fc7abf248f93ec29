import math
import random
import yaml
from typing import Iterable, Optional
from .models import ClassifierResult, Label

# Load config using centralized path management
from .config import get_config_path

try:
    with open(get_config_path("signal_words.yaml"), encoding="utf-8") as f:
        SIGNAL_WORDS = yaml.safe_load(f)
except FileNotFoundError as e:
    raise RuntimeError(f"Failed to load signal words configuration: {e}") from e
except yaml.YAMLError as e:
    raise ValueError(f"Invalid YAML in signal_words.yaml: {e}") from e

if not isinstance(SIGNAL_WORDS, dict) or not SIGNAL_WORDS.get("fake_signal_words") \
        or not SIGNAL_WORDS.get("real_signal_words"):
    raise ValueError(
        "Invalid signal_words.yaml: 'fake_signal_words' and 'real_signal_words' must be non-empty lists"
    )

VERSION = SIGNAL_WORDS.get("version", "unknown")
FAKE_SIGNAL_WORDS = tuple(w.lower() for w in SIGNAL_WORDS["fake_signal_words"])
REAL_SIGNAL_WORDS = tuple(w.lower() for w in SIGNAL_WORDS["real_signal_words"])

# Confidence is a mock value, independent of the score margin
CONFIDENCE_BASE = 60
CONFIDENCE_SPREAD = 30
CONFIDENCE_MIN = 65
CONFIDENCE_MAX = 95

def score(text: str, words: Iterable[str]) -> list[str]:
    """Return the signal words found in text (case-insensitive substring match, each counted once)."""
    lowered = text.lower()
    return [w for w in words if w in lowered]

def draw_confidence(rng: Optional[random.Random] = None) -> int:
    draw = CONFIDENCE_BASE + (rng or random).uniform(0, CONFIDENCE_SPREAD)
    # Halves round up
    return int(math.floor(min(max(draw, CONFIDENCE_MIN), CONFIDENCE_MAX) + 0.5))

def classify(text: str, rng: Optional[random.Random] = None) -> ClassifierResult:
    """
    Keyword-count heuristic.

    - fake_score / real_score: number of signal words present in the text
    - FAKE only when fake_score > real_score; ties (including 0/0) are REAL
    - confidence: uniform draw clamped to [65, 95]

    Pure and total: returns a result for any string, including "".
    """
    fake_hits = score(text, FAKE_SIGNAL_WORDS)
    real_hits = score(text, REAL_SIGNAL_WORDS)

    label = Label.FAKE if len(fake_hits) > len(real_hits) else Label.REAL

    return ClassifierResult(
        label=label,
        confidence=draw_confidence(rng),
        fake_score=len(fake_hits),
        real_score=len(real_hits),
        trigger_spans=fake_hits + real_hits,
    )
