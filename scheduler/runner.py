"""Console host for the workout engine.

Usage:
    python -m scheduler.runner --plan 12               # print day 12's plan
    python -m scheduler.runner --plan 12 --focus legs  # focused plan
    python -m scheduler.runner --status                # streak and phase
    python -m scheduler.runner --run                   # next available day
    python -m scheduler.runner --run 7                 # a specific day
    python -m scheduler.runner --reset                 # wipe all data

During ``--run``: Enter completes the exercise, ``n``/``p`` skip
forward/back, ``s`` skips the rest, ``q`` aborts.
"""

from __future__ import annotations

import argparse
import logging
import sys

from workout_engine.engine import SessionEngine
from workout_engine.models.enums import Category, SessionStatus
from workout_engine.models.exercise import PlanItem
from workout_engine.plan_builder import generate_plan
from workout_store import AppState, JsonFileStore

from scheduler.config import LOG_LEVEL, STORE_PATH, TICK_SECONDS
from scheduler.rest_timer import APSchedulerTickSource

logger = logging.getLogger(__name__)


def format_plan(plan: tuple[PlanItem, ...]) -> str:
    """One line per exercise: '1. Squats (Legs) x 15'."""
    return "\n".join(
        f"{i}. {item.name} ({item.category.label}) x {item.reps}"
        for i, item in enumerate(plan, start=1)
    )


def format_status(state: AppState) -> str:
    ledger = state.ledger
    return "\n".join([
        f"Streak: {ledger.streak} days",
        f"Intensity: {ledger.display_intensity:.2f}x",
        f"Phase {ledger.current_phase}: {ledger.phase_progress}/30 days "
        f"({ledger.completion_pct}%)",
        f"Next day: {ledger.next_available_day()}",
    ])


def run_session(
    engine: SessionEngine,
    ticker: APSchedulerTickSource,
    day: int,
    focus: Category | None,
) -> None:
    """Interactive loop; returns when the session completes or aborts."""
    with ticker.lock:
        engine.start(day, focus)
    print(f"Day {day}\n{format_plan(engine.plan)}\n")

    while engine.is_active:
        with ticker.lock:
            status = engine.status
            seen = (status, engine.session.exercise_index)
            if status == SessionStatus.RESTING:
                nxt = engine.next_exercise
                prompt = f"REST {engine.session.rest_remaining}s, next: {nxt.name} [s/q] "
            else:
                item = engine.current_exercise
                current, total = engine.position
                prompt = f"[{current}/{total}] {item.name} x {item.reps} [Enter/n/p/q] "
        command = input(prompt).strip().lower()

        with ticker.lock:
            if (engine.status, engine.session.exercise_index) != seen and command != "q":
                # the rest ran out while waiting for input
                continue
            if command == "q":
                engine.abort()
            elif command == "n":
                engine.skip_forward()
            elif command == "p":
                engine.skip_backward()
            elif command == "s":
                engine.skip_rest()
            elif command == "":
                engine.complete_current_exercise()

    summary = engine.last_summary
    if summary is not None:
        print(
            f"DAY {summary.day} COMPLETE: {summary.calories_burned} kcal, "
            f"{summary.duration_minutes} min"
        )
    else:
        print("Session aborted")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="RED-CARDUH workout runner")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--plan", type=int, metavar="DAY", help="Print the plan for DAY")
    group.add_argument("--status", action="store_true", help="Show streak and phase")
    group.add_argument(
        "--run", type=int, nargs="?", const=0, metavar="DAY",
        help="Run a session (default: next available day)",
    )
    group.add_argument("--reset", action="store_true", help="Wipe all stored data")
    parser.add_argument("--focus", type=Category.from_label, help="Restrict to one category")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    state = AppState.load(JsonFileStore(STORE_PATH))

    if args.plan is not None:
        if args.plan < 1:
            parser.error("DAY must be >= 1")
        print(format_plan(generate_plan(args.plan, args.focus)))
    elif args.status:
        print(format_status(state))
    elif args.reset:
        state.wipe()
        print("All data wiped")
    else:
        day = args.run or state.ledger.next_available_day()
        if day < 1:
            parser.error("DAY must be >= 1")
        ticker = APSchedulerTickSource(interval_s=TICK_SECONDS)
        engine = SessionEngine(state, ticker=ticker)
        try:
            run_session(engine, ticker, day, args.focus)
        except (KeyboardInterrupt, EOFError):
            with ticker.lock:
                engine.abort()
            logger.info("Session interrupted")
        finally:
            ticker.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
