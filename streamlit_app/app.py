"""RED-CARDUH — Streamlit workout dashboard.

Run with:
    streamlit run streamlit_app/app.py

State is persisted to the JSON store named by REDCARDUH_STORE_PATH.
The rest countdown is driven by a fragment that reruns every second and
calls ``SessionEngine.tick()``.
"""

from __future__ import annotations

import streamlit as st

from workout_engine.constants import (
    HEIGHT_RANGE_CM,
    REST_DURATION_RANGE_S,
    SESSION_DURATION_RANGE_MIN,
    WEIGHT_RANGE_KG,
)
from workout_engine.engine import SessionEngine
from workout_engine.models.enums import Category, DayStatus, Gender, SessionStatus
from workout_engine.plan_builder import generate_plan
from workout_store import AppState, JsonFileStore

from scheduler.config import STORE_PATH

from helpers import (
    CATEGORY_ICONS,
    DAY_STATUS_LABELS,
    RestTicker,
    clamp,
    format_intensity,
    format_phase_progress,
    format_rest,
    matrix_rows,
    plan_frame,
    recent_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="RED-CARDUH",
    page_icon="🟥",
    layout="centered",
)


# ---------------------------------------------------------------------------
# Session-scoped engine and state
# ---------------------------------------------------------------------------


def _get_engine() -> SessionEngine:
    """One AppState + engine per browser session, loaded from the store once."""
    if "engine" not in st.session_state:
        state = AppState.load(JsonFileStore(STORE_PATH))
        st.session_state["engine"] = SessionEngine(state)
        st.session_state["rest_ticker"] = RestTicker()
        st.session_state["view"] = "dashboard" if state.profile.onboarded else "onboarding"
    return st.session_state["engine"]


def _go(view: str) -> None:
    st.session_state["view"] = view
    st.rerun()


def _start(day: int, focus: Category | None = None) -> None:
    engine.start(day, focus)
    _go("workout")


engine = _get_engine()
rest_ticker: RestTicker = st.session_state["rest_ticker"]
state = engine.state
ledger = state.ledger


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def onboarding_view() -> None:
    st.title("RED-CARDUH")
    with st.form("onboarding"):
        name = st.text_input("Protocol Name", value=state.profile.name)
        c1, c2 = st.columns(2)
        height = c1.number_input(
            "Height (cm)", *HEIGHT_RANGE_CM,
            clamp(float(state.profile.height_cm), HEIGHT_RANGE_CM),
        )
        weight = c2.number_input(
            "Weight (kg)", *WEIGHT_RANGE_KG,
            clamp(float(state.profile.weight_kg), WEIGHT_RANGE_KG), step=0.5,
        )
        dob = st.text_input("Date of Birth", value=state.profile.dob)
        genders = list(Gender)
        gender = st.radio(
            "Gender", genders,
            index=genders.index(state.profile.gender),
            format_func=lambda g: g.value.upper(),
            horizontal=True,
        )
        if st.form_submit_button("Initialize Grid", type="primary"):
            state.update_profile(
                name=name, height_cm=height, weight_kg=weight,
                dob=dob, gender=gender, onboarded=True,
            )
            _go("dashboard")


def dashboard_view() -> None:
    st.title("RED-CARDUH")

    c1, c2, c3 = st.columns(3)
    c1.metric("Streak", f"{ledger.streak} DAYS")
    c2.metric("Intensity", format_intensity(ledger.display_intensity))
    c3.metric("Weight", f"{state.profile.weight_kg:g} KG")

    st.subheader("Progress Tracker")
    st.caption(format_phase_progress(ledger))
    st.progress(ledger.phase_progress / 30)

    next_day = ledger.next_available_day()

    st.subheader("Targeted Days")
    cols = st.columns(len(Category))
    for col, category in zip(cols, Category):
        if col.button(f"{CATEGORY_ICONS[category]} {category.label}", key=f"focus_{category.name}"):
            _start(next_day, category)

    st.subheader("Training Matrix")
    for row in matrix_rows(ledger):
        cols = st.columns(len(row))
        for col, (day, status) in zip(cols, row):
            label = f"{day:02d}"
            if DAY_STATUS_LABELS[status]:
                label += f" · {DAY_STATUS_LABELS[status]}"
            if col.button(
                label,
                key=f"day_{day}",
                disabled=status == DayStatus.LOCKED,
                type="primary" if status == DayStatus.NEXT else "secondary",
                help=f"status: {status.name.lower()}",
            ):
                _start(day)

    st.divider()
    st.markdown(f"### NEXT PROTOCOL — Day {next_day}")
    st.dataframe(plan_frame(generate_plan(next_day)), use_container_width=True)
    if st.button("RESUME SESSION ▶", type="primary"):
        _start(next_day)


@st.fragment(run_every=1)
def rest_countdown() -> None:
    """Reruns every second while resting; ticks once per elapsed second."""
    if engine.status != SessionStatus.RESTING:
        return
    for _ in range(rest_ticker.due()):
        if not engine.tick():
            break
    if engine.status != SessionStatus.RESTING:
        st.rerun()
    session = engine.session
    nxt = engine.next_exercise
    st.markdown(
        f'<h1 style="text-align:center;font-size:6rem;">REST</h1>'
        f'<p style="text-align:center;font-size:3rem;">{format_rest(session.rest_remaining)}</p>',
        unsafe_allow_html=True,
    )
    if nxt is not None:
        st.caption(f"Next: {nxt.name}")


def workout_view() -> None:
    if not engine.is_active:
        _go("summary" if engine.last_summary else "dashboard")
        return

    session = engine.session
    if engine.status == SessionStatus.RESTING:
        rest_countdown()
        if st.button("SKIP RECOVERY ⏭"):
            engine.skip_rest()
            st.rerun()
        return

    rest_ticker.reset()
    item = engine.current_exercise
    current, total = engine.position

    head_l, head_r = st.columns([3, 1])
    if head_l.button("← ABORT"):
        engine.abort()
        _go("dashboard")
    head_r.caption(f"Protocol {session.day} · {current}/{total} · Live MET: {item.met}")

    st.caption(item.category.label.upper())
    st.header(item.name)
    st.metric("Reps", item.reps)

    with st.expander("Adjust Rest"):
        lo, hi, step = REST_DURATION_RANGE_S
        shown_rest = clamp(state.config.rest_duration_s, REST_DURATION_RANGE_S)
        rest = st.number_input(
            "Rest Duration (seconds)", lo, hi, shown_rest, step,
            key="adjust_rest",
        )
        if rest != shown_rest:
            engine.adjust_rest_duration(rest)

    back, complete, forward = st.columns([1, 3, 1])
    if back.button("◀", disabled=engine.position[0] == 1):
        engine.skip_backward()
        st.rerun()
    if complete.button("COMPLETE PHASE", type="primary", use_container_width=True):
        if engine.complete_current_exercise() is not None:
            _go("summary")
        st.rerun()
    if forward.button("▶", disabled=current == total):
        engine.skip_forward()
        st.rerun()


def summary_view() -> None:
    summary = engine.last_summary
    if summary is None:
        _go("dashboard")
        return
    st.title(f"DAY {summary.day} COMPLETE")
    c1, c2 = st.columns(2)
    c1.metric("Energy", f"{summary.calories_burned} KCAL")
    c2.metric("Time", f"{summary.duration_minutes} MIN")
    if st.button("RETURN TO GRID", type="primary"):
        _go("dashboard")


def progress_view() -> None:
    st.title("PROGRESS")

    st.subheader("Completion Rate")
    st.metric(f"Phase {ledger.current_phase}", f"{ledger.completion_pct}%")
    st.caption(f"Total Protocols: {ledger.streak}")

    st.subheader("Checkpoints")
    checkpoints = ledger.checkpoints()
    if not checkpoints:
        st.caption("No checkpoints reached yet. Complete 30 days to unlock.")
    for cp in checkpoints:
        st.markdown(f"✅ **Checkpoint {cp.number}** — DAYS {cp.first_day} - {cp.last_day}")

    c1, c2 = st.columns([3, 1])
    c1.metric("Current Weight", f"{state.profile.weight_kg:g} KG")
    if c2.button("Update"):
        _go("settings")

    st.subheader("Recent Activity")
    st.dataframe(recent_frame(ledger), hide_index=True, use_container_width=True)


def settings_view() -> None:
    st.title("SETTINGS")

    st.subheader("Name")
    # stored values may sit outside the widget ranges; only a user edit writes back
    name = st.text_input("Name", value=state.profile.name)
    shown_weight = clamp(float(state.profile.weight_kg), WEIGHT_RANGE_KG)
    weight = st.number_input("Weight (kg)", *WEIGHT_RANGE_KG, shown_weight, step=0.5)
    if name != state.profile.name or weight != shown_weight:
        state.update_profile(name=name, weight_kg=weight)

    st.subheader("Timer")
    shown = (
        clamp(state.config.session_duration_min, SESSION_DURATION_RANGE_MIN),
        clamp(state.config.rest_duration_s, REST_DURATION_RANGE_S),
    )
    lo, hi, step = SESSION_DURATION_RANGE_MIN
    session_min = st.slider("Session Duration (min)", lo, hi, shown[0], step)
    lo, hi, step = REST_DURATION_RANGE_S
    rest_s = st.slider("Rest Duration (s)", lo, hi, shown[1], step)
    if (session_min, rest_s) != shown:
        state.update_config(session_duration_min=session_min, rest_duration_s=rest_s)

    st.divider()
    confirm = st.checkbox("Wipe all data? This cannot be undone.")
    if st.button("PURGE ALL DATA", disabled=not confirm):
        engine.abort()
        state.wipe()
        st.session_state.pop("engine", None)
        _go("onboarding")


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------

VIEWS = {
    "onboarding": onboarding_view,
    "dashboard": dashboard_view,
    "workout": workout_view,
    "summary": summary_view,
    "progress": progress_view,
    "settings": settings_view,
}

view = st.session_state.get("view", "dashboard")

if view in ("dashboard", "progress", "settings"):
    nav = st.columns(3)
    for col, (target, label) in zip(nav, (("dashboard", "Home"), ("progress", "Progress"), ("settings", "Settings"))):
        if col.button(label, key=f"nav_{target}", type="primary" if view == target else "secondary"):
            _go(target)

VIEWS[view]()
