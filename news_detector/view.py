"""
HTML presentation of the analysis state.

The page is rendered server-side from a state snapshot. A short inline script
posts to the JSON endpoints and reloads the page once the analysis finishes;
editing the text while a verdict is shown resets the analysis, so a stale
badge never sits next to changed text.
"""
from html import escape
from typing import List
from .core.models import AnalysisResult, HistoryEntry, Label

MAX_TEXT_DISPLAY = 1000

VERDICT_TEXT = {
    Label.REAL: "LIKELY REAL",
    Label.FAKE: "LIKELY FAKE",
}

VERDICT_BLURB = {
    Label.REAL: "This content appears to follow journalistic standards and contains credible indicators.",
    Label.FAKE: "This content shows characteristics commonly associated with misinformation or biased reporting.",
}

def is_submit_disabled(text: str, state: AnalysisResult) -> bool:
    return not text.strip() or state.is_loading

def render_result(state: AnalysisResult) -> str:
    """Result section: busy indicator while loading, badge + confidence bar once resolved."""
    if state.is_loading:
        return (
            '<section id="result" class="result loading" aria-busy="true">'
            '<p>Analyzing content for authenticity...</p>'
            '</section>'
        )
    if state.label == Label.UNSET:
        return '<section id="result" class="result empty"></section>'

    css = state.label.value.lower()
    return (
        f'<section id="result" class="result {css}">'
        f'<div class="badge {css}">{VERDICT_TEXT[state.label]}</div>'
        f'<p>Confidence Level: <strong>{state.confidence}%</strong></p>'
        f'<div class="bar"><div class="fill {css}" style="width: {state.confidence}%"></div></div>'
        f'<p class="blurb">{VERDICT_BLURB[state.label]}</p>'
        '</section>'
    )

def render_history(entries: List[HistoryEntry]) -> str:
    if not entries:
        return '<ol id="history"></ol>'
    items = []
    # Newest first
    for entry in reversed(entries):
        items.append(
            f'<li><span class="badge {entry.result.label.value.lower()}">{entry.result.label.value}</span> '
            f'{entry.result.confidence}% '
            f'<time>{entry.submitted_at.isoformat()}</time> '
            f'<q>{escape(entry.text[:200])}</q></li>'
        )
    return '<ol id="history">' + "".join(items) + '</ol>'

_STYLE = """
body { font-family: sans-serif; max-width: 42rem; margin: 2rem auto; color: #222; }
textarea { width: 100%; box-sizing: border-box; }
.badge { display: inline-block; padding: .25rem .75rem; border-radius: .5rem; font-weight: bold; }
.badge.real { background: #dcfce7; color: #166534; }
.badge.fake { background: #fee2e2; color: #991b1b; }
.bar { background: #e5e7eb; height: .5rem; border-radius: .25rem; }
.fill { height: .5rem; border-radius: .25rem; }
.fill.real { background: #22c55e; }
.fill.fake { background: #ef4444; }
"""

_SCRIPT = """
const input = document.getElementById('news-input');
const button = document.getElementById('check');
const counter = document.getElementById('counter');
let busy = false;
function refresh() {
  counter.textContent = input.value.length + '/%(max)d';
  button.disabled = !input.value.trim() || busy;
}
input.addEventListener('input', () => {
  const shown = document.querySelector('#result .badge');
  if (shown) {
    fetch('reset', {method: 'POST'});
    document.getElementById('result').outerHTML =
      '<section id="result" class="result empty"></section>';
  }
  refresh();
});
button.addEventListener('click', async () => {
  busy = true; refresh();
  input.disabled = true;
  button.textContent = 'Analyzing...';
  document.getElementById('result').outerHTML =
    '<section id="result" class="result loading" aria-busy="true"><p>Analyzing content for authenticity...</p></section>';
  try {
    await fetch('analyze', {method: 'POST', headers: {'Content-Type': 'application/json'},
                            body: JSON.stringify({text: input.value})});
  } finally {
    window.location.reload();
  }
});
refresh();
"""

def render_page(state: AnalysisResult, history: List[HistoryEntry], text: str = "") -> str:
    disabled = " disabled" if is_submit_disabled(text, state) else ""
    input_disabled = " disabled" if state.is_loading else ""
    button_label = "Analyzing..." if state.is_loading else "Check News"
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        "<title>Fake News Detector</title>"
        f"<style>{_STYLE}</style></head><body>"
        "<header><h1>Fake News Detector</h1>"
        "<p>Analyze news articles and headlines for authenticity.</p></header>"
        '<main>'
        '<label for="news-input">Enter news text or headline to analyze</label>'
        f'<textarea id="news-input" rows="6" '
        f'placeholder="Paste your news article, headline, or suspicious text here..."{input_disabled}>'
        f"{escape(text)}</textarea>"
        f'<div id="counter">{len(text)}/{MAX_TEXT_DISPLAY}</div>'
        f'<button id="check" type="button"{disabled}>{button_label}</button>'
        f"{render_result(state)}"
        "<h2>History</h2>"
        f"{render_history(history)}"
        "</main>"
        "<footer><p><strong>Disclaimer:</strong> This is a demonstration tool. "
        "Always verify news from multiple trusted sources.</p></footer>"
        f"<script>{_SCRIPT % {'max': MAX_TEXT_DISPLAY}}</script>"
        "</body></html>"
    )
