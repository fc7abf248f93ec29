import json
import asyncio
import argparse
from pathlib import Path
from typing import Optional
from ..core.classifier import VERSION
from ..core.config import CASES_DIR
from ..core.models import Label
from ..core.orchestrator import AnalysisOrchestrator
from ..core.store import AnalysisStore

REPORT_PATH = Path("replay_report.md")

async def replay_one(case: dict, orchestrator: Optional[AnalysisOrchestrator] = None) -> dict:
    """Run every turn of a case through a fresh orchestrator (no latency) and compare labels."""
    if orchestrator is None:
        orchestrator = AnalysisOrchestrator(AnalysisStore(), latency_s=0)

    case_id = case["case_id"]
    results = {"case_id": case_id, "turns": []}

    turns = case.get("turns", [])
    if not turns:
        turns = [{"text": case["text"], "expected": case["expected"]}]

    for turn in turns:
        expected = Label(turn["expected"]).value
        await orchestrator.submit(turn["text"])
        state = orchestrator.get_current_state()
        predicted = state.label.value

        results["turns"].append({
            "input": turn["text"],
            "expected": expected,
            "predicted": predicted,
            "confidence": state.confidence,
            "match": predicted == expected
        })

    return results

def calculate_metrics(all_results: list) -> dict:
    total = 0
    correct = 0
    missed_fake = 0
    false_fake = 0

    for r in all_results:
        for turn in r["turns"]:
            total += 1
            if turn["match"]:
                correct += 1
            elif turn["expected"] == Label.FAKE.value:
                missed_fake += 1
            else:
                false_fake += 1

    return {
        "total": total,
        "correct": correct,
        "accuracy": correct / total if total > 0 else 0,
        "missed_fake": missed_fake,
        "false_fake": false_fake
    }

def load_cases(cases_dir: Path) -> list:
    cases = []
    for cf in sorted(cases_dir.glob("*.json")):
        with open(cf, encoding="utf-8") as f:
            cases.append(json.load(f))
    return cases

def write_report(all_results: list, metrics: dict, report_path: Path) -> None:
    with open(report_path, "w", encoding="utf-8") as f:
        f.write("# Replay Report\n\n")
        f.write(f"**Signal words:** {VERSION}\n\n")
        f.write("## Metrics\n\n")
        f.write(f"- Total: {metrics['total']}\n")
        f.write(f"- Correct: {metrics['correct']}\n")
        f.write(f"- Accuracy: {metrics['accuracy']:.2%}\n")
        f.write(f"- Missed Fake: {metrics['missed_fake']}\n")
        f.write(f"- False Fake: {metrics['false_fake']}\n\n")

        f.write("## Case Results\n\n")
        for r in all_results:
            f.write(f"### {r['case_id']}\n\n")
            for t in r["turns"]:
                status = "✓" if t["match"] else "✗"
                f.write(f"- {status} Input: \"{t['input']}\"\n")
                f.write(f"  - Expected: {t['expected']}, Got: {t['predicted']} ({t['confidence']}%)\n")
            f.write("\n")

async def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Replay labelled cases through the classifier")
    parser.add_argument("--cases", default=str(CASES_DIR))
    parser.add_argument("--report", default=str(REPORT_PATH))
    args = parser.parse_args(argv)

    all_results = []
    for case in load_cases(Path(args.cases)):
        all_results.append(await replay_one(case))

    metrics = calculate_metrics(all_results)
    write_report(all_results, metrics, Path(args.report))

    print(f"Report saved to {args.report}")
    return metrics

if __name__ == "__main__":
    asyncio.run(main())
