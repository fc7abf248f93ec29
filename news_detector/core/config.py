"""
Configuration path and runtime settings.

Resolves config files from the project root instead of the working directory,
so the app, the tests and the replay harness all see the same signal words.
"""
from pathlib import Path
import os

# news_detector/core/config.py -> news_detector -> project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

CONFIG_DIR = _PROJECT_ROOT / "config"
CASES_DIR = _PROJECT_ROOT / "cases"

# Simulated inference latency, stands in for a real backend call
DEFAULT_LATENCY_MS = 1500

if os.getenv("NEWS_DETECTOR_CONFIG_DIR"):
    CONFIG_DIR = Path(os.getenv("NEWS_DETECTOR_CONFIG_DIR")).resolve()

def get_config_path(filename: str) -> Path:
    """Get absolute path to a config file."""
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            f"Config directory: {CONFIG_DIR}\n"
            f"Project root: {_PROJECT_ROOT}"
        )
    return path

def get_latency_s() -> float:
    """
    Simulated latency in seconds.

    Environment Variable:
        NEWS_DETECTOR_LATENCY_MS: integer milliseconds (0 disables the delay)
    """
    raw = os.getenv("NEWS_DETECTOR_LATENCY_MS", "").strip()
    if not raw:
        return DEFAULT_LATENCY_MS / 1000
    try:
        latency_ms = int(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid NEWS_DETECTOR_LATENCY_MS={raw!r}: expected integer milliseconds"
        ) from e
    if latency_ms < 0:
        raise ValueError(f"Invalid NEWS_DETECTOR_LATENCY_MS={raw!r}: must be >= 0")
    return latency_ms / 1000

def get_project_root() -> Path:
    """Get the project root directory."""
    return _PROJECT_ROOT
