"""Volební kalkulačka Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.repositories import DataNotFoundError  # noqa: E402
from app.services.polls.trends import ALL_AGENCIES  # noqa: E402
from web.api import calculator, polls, profiles  # noqa: E402
from web.api.calculator.schemas import AnswerItem  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Volební kalkulačka", page_icon="🗳️", layout="wide")

COLORS = {
    "ano": "#0D47A1",
    "spolu": "#2E7D32",
    "stan": "#D81B60",
    "spd": "#C62828",
    "pirati": "#121212",
    "stacilo": "#B71C1C",
    "motoriste": "#29B6F6",
    "prisaha": "#0D47A1",
    "volt": "#502379",
    "ceskarepublika1": "#8BC34A",
    "slovan": "#795548",
}

SCALE = {-2: "Strongly disagree", -1: "Disagree", 0: "Neutral", 1: "Agree", 2: "Strongly agree"}
WEIGHTS = {0: "Skip", 1: "Low", 2: "Medium", 3: "High"}


def color(party_id: str) -> str:
    return COLORS.get(party_id, "#6B7280")


@st.cache_data(ttl=3600, show_spinner=False)
def get_questions(mode: str, seed: int):
    """Get quiz questions via views."""
    resp = calculator.get_questions(mode, seed)
    return [q.model_dump() for q in resp.items]


@st.cache_data(ttl=3600, show_spinner=False)
def get_profiles():
    """Get party profiles via views."""
    logger.info("Loading party profiles")
    return [p.model_dump() for p in profiles.get_profiles().items]


@st.cache_data(ttl=3600, show_spinner=False)
def get_poll_trends(agency: str):
    """Get poll trends via views."""
    return polls.get_trends(agency).model_dump()


def bar_chart(data: list, x_key: str, y_key: str, title: str = "", colors: list | str | None = None) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[d[x_key] for d in data],
            y=[d[y_key] for d in data],
            marker_color=colors,
            text=[f"{d[y_key]:.1f}" for d in data],
            textposition="outside",
        )
    ).update_layout(
        title=title,
        xaxis_title="",
        yaxis_title="",
        margin=dict(t=40, b=40, l=40, r=20),
        height=350,
    )


def trend_chart(trends: dict, names: dict[str, str]) -> go.Figure:
    fig = go.Figure()
    for party_id, values in trends["series"].items():
        fig.add_trace(
            go.Scatter(
                x=trends["dates"],
                y=values,
                name=names.get(party_id, party_id.upper()),
                mode="lines+markers",
                line=dict(color=color(party_id)),
                connectgaps=True,
            )
        )
    return fig.update_layout(
        xaxis_title="Poll date",
        yaxis_title="Preference (%)",
        yaxis=dict(rangemode="tozero"),
        margin=dict(t=20, b=40, l=40, r=20),
        height=420,
    )


def quiz_tab():
    """Calculator tab."""
    mode = st.radio("Mode", ["quick", "full"], horizontal=True, format_func=lambda m: m.capitalize())
    seed = st.session_state.setdefault("quiz_seed", 2025)
    questions = get_questions(mode, seed)

    if not questions:
        st.info("No theses available.")
        return

    answers = []
    for i, q in enumerate(questions, 1):
        st.markdown(f"**{i}. {q['text']}**")
        col1, col2 = st.columns([3, 1])
        value = col1.select_slider(
            "Stance", options=list(SCALE), value=0, format_func=SCALE.get, key=f"value_{q['id']}"
        )
        weight = col2.selectbox(
            "Importance", options=list(WEIGHTS), index=2, format_func=WEIGHTS.get, key=f"weight_{q['id']}"
        )
        answers.append(AnswerItem(thesis_id=q["id"], value=value, weight=weight))

    red_lines = st.multiselect(
        "Red lines (deal breakers)",
        options=[q["id"] for q in questions],
        format_func=lambda tid: next(q["text"] for q in questions if q["id"] == tid),
    )

    if not st.button("Show results", type="primary"):
        return

    results = calculator.get_results(answers, red_lines)
    if not results.answered:
        st.warning("All questions were skipped.")
        return

    items = [r.model_dump() for r in results.items]
    st.subheader("🎯 Agreement with parties")
    st.plotly_chart(
        bar_chart(items, "party_name", "agreement_percentage", "Agreement (%)", [color(r["party_id"]) for r in items]),
        width="stretch",
    )

    top = items[0]
    cols = st.columns(3)
    cols[0].metric("Best match", top["party_name"], f"{top['agreement_percentage']:.1f}%")
    cols[1].metric("Coverage", f"{top['coverage_percentage']}%")
    cols[2].metric("Confidence", f"{top['confidence_score'] * 100:.0f}%")

    texts = {q["id"]: q["text"] for q in questions}
    for r in items:
        with st.expander(f"**{r['party_name']}** · {r['agreement_percentage']:.1f}% ({r['coverage_percentage']}% coverage)"):
            comparison = calculator.get_comparison(answers, r["party_id"])
            for label, rows in (
                ("✅ Strong agreement", comparison.strong_agreements),
                ("➖ Partial agreement", comparison.partial_agreements),
                ("❌ Strong disagreement", comparison.strong_disagreements),
            ):
                if rows:
                    st.write(f"**{label}**")
                    for t in rows:
                        st.write(f"- {texts.get(t.thesis_id, t.thesis_id)} (you {t.user_value:+.0f}, party {t.party_value:+.0f})")


def profiles_tab():
    """Party profiles tab."""
    data = get_profiles()
    if not data:
        st.info("No party data available.")
        return

    names = {p["id"]: p["name"] for p in data}
    party_id = st.selectbox("Party", list(names), format_func=names.get)
    party = next(p for p in data if p["id"] == party_id)

    st.subheader(party["name"])
    if party["description"]:
        st.write(party["description"])

    metrics = party["metrics"]
    if metrics is None:
        st.info("This party has no recorded positions yet.")
    else:
        cols = st.columns(4)
        cols[0].metric("Positions", metrics["position_count"])
        cols[1].metric("Coverage", f"{metrics['coverage_ratio'] * 100:.0f}%")
        cols[2].metric("Avg. confidence", f"{metrics['avg_confidence'] * 100:.0f}%")
        cols[3].metric("Last update", (metrics["latest_update"] or "—")[:10])

        if metrics["top_issues"]:
            st.subheader("📊 Engagement by issue")
            st.plotly_chart(
                bar_chart(metrics["top_issues"], "title", "engagement_score", "Engagement score (0-100)", color(party_id)),
                width="stretch",
            )

    col1, col2 = st.columns(2)
    with col1:
        for label, key in (("👍 Pros", "pros"), ("🏆 Achievements", "historical_achievements")):
            if party[key]:
                st.write(f"**{label}**")
                st.write("\n".join(f"- {x}" for x in party[key]))
    with col2:
        for label, key in (("👎 Cons", "cons"), ("⚠️ Controversies", "controversies")):
            if party[key]:
                st.write(f"**{label}**")
                st.write("\n".join(f"- {x}" for x in party[key]))


def polls_tab():
    """Poll trends tab."""
    agencies = [ALL_AGENCIES, *container.polls.agencies()]
    agency = st.selectbox("Agency", agencies, format_func=lambda a: "All agencies" if a == ALL_AGENCIES else a)
    trends = get_poll_trends(agency)

    if not trends["dates"]:
        st.info("No polls available.")
        return

    names = {p.id: p.label for p in container.reference.get_parties()}
    st.caption(f"Timeframe: {trends['start']} – {trends['end']}")
    st.plotly_chart(trend_chart(trends, names), width="stretch")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("📈 Timeframe averages")
        for a in trends["averages"]:
            st.write(f"**{names.get(a['party_id'], a['party_id'])}** {a['average']:.1f}% ({a['change']:+.1f} p.b., {a['samples']} polls)")
    with col2:
        st.subheader("🔀 Biggest moves")
        for h in trends["highlights"]:
            st.write(f"**{names.get(h['party_id'], h['party_id'])}** {h['earliest']:.1f}% → {h['latest']:.1f}% ({h['diff']:+.1f} p.b.)")


def main():
    st.title("🗳️ Volební kalkulačka 2025")
    st.markdown("*Compare your views with Czech parties, browse their profiles and follow the polls*")

    tab1, tab2, tab3 = st.tabs(["🗳️ Calculator", "👥 Party profiles", "📈 Polls"])

    try:
        with tab1:
            quiz_tab()

        with tab2:
            profiles_tab()

        with tab3:
            polls_tab()
    except DataNotFoundError as e:
        st.error(f"{e.message}. Run 'python sync_data.py' first.")

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Data:** party programmes, roll-call votes and public statements")


if __name__ == "__main__":
    main()
