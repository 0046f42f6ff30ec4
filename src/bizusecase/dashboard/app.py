from __future__ import annotations

import random
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd
import streamlit as st

from bizusecase.config import DEFAULT_CONFIG_PATH, generator_seed, load_config
from bizusecase.engine import UseCase, UseCaseAnalyzer, UseCaseGenerator
from bizusecase.errors import InvalidCostInput


def load_resources(config_path: Path = DEFAULT_CONFIG_PATH) -> Tuple[Dict, UseCaseGenerator, Dict]:
    cfg = load_config(config_path)
    generator = UseCaseGenerator(rng=random.Random(generator_seed(cfg)))
    roi_defaults = (cfg.get("analysis") or {}).get("roi_example") or {}
    defaults = {
        "cost": float(roi_defaults.get("cost", 50000)),
        "annual_benefit": float(roi_defaults.get("annual_benefit", 120000)),
        "top_count": int((cfg.get("api") or {}).get("default_top_count", 5)),
    }
    return cfg, generator, defaults


def ranking_frame(use_cases: List[UseCase]) -> pd.DataFrame:
    rows = [
        {
            "Title": uc.title,
            "Domain": uc.domain,
            "Priority": uc.priority,
            "Feasibility": uc.feasibility,
            "Benefits": len(uc.benefits),
            "Score": round(uc.calculate_score(), 2),
            "Effort": UseCaseAnalyzer.estimate_effort(uc),
        }
        for uc in use_cases
    ]
    return pd.DataFrame(
        rows,
        columns=["Title", "Domain", "Priority", "Feasibility", "Benefits", "Score", "Effort"],
    )


def _generator() -> Tuple[UseCaseGenerator, Dict]:
    # One generator per browser session, kept across reruns.
    if "generator" not in st.session_state:
        _, generator, defaults = load_resources()
        st.session_state["generator"] = generator
        st.session_state["defaults"] = defaults
    return st.session_state["generator"], st.session_state["defaults"]


def main() -> None:
    st.set_page_config(page_title="AI Use Case Portfolio", layout="wide")
    st.title("AI Use Case Portfolio")

    generator, defaults = _generator()

    sidebar = st.sidebar
    sidebar.header("Generate")
    domain_names = [d.name for d in generator.domains]
    selected = sidebar.multiselect("Domains", domain_names, default=domain_names)
    per_domain = sidebar.number_input("Use cases per domain", min_value=1, max_value=10, value=1)
    challenge = sidebar.text_input("Custom challenge (optional)")
    if sidebar.button("Generate use cases"):
        for name in selected:
            for _ in range(int(per_domain)):
                generator.generate_for_domain(name, challenge or None)

    use_cases = generator.get_all()
    analysis = generator.analyze()

    col1, col2, col3 = st.columns(3)
    col1.metric("Use cases", analysis.total_use_cases)
    col2.metric("Average score", f"{analysis.average_score:.2f}")
    col3.metric("Domains covered", len(analysis.by_domain))

    if not use_cases:
        st.info("Pick one or more domains in the sidebar and generate use cases to start.")
        return

    st.subheader("Ranking")
    top_count = st.number_input(
        "Show top",
        min_value=1,
        max_value=len(use_cases),
        value=min(defaults["top_count"], len(use_cases)),
    )
    st.dataframe(ranking_frame(generator.get_top(int(top_count))), use_container_width=True)

    st.subheader("Portfolio mix")
    c1, c2, c3 = st.columns(3)
    c1.bar_chart(pd.Series(analysis.by_domain, name="Domain"))
    c2.bar_chart(pd.Series(analysis.by_priority, name="Priority"))
    c3.bar_chart(pd.Series(analysis.by_feasibility, name="Feasibility"))

    st.subheader("Use case detail")
    labels = {f"{uc.title} ({uc.id})": uc for uc in use_cases}
    choice = labels[st.selectbox("Use case", list(labels))]
    left, right = st.columns(2)
    with left:
        st.markdown(f"**{choice.title}**  \n{choice.description}")
        st.markdown("**Benefits**\n" + "\n".join(f"- {b}" for b in choice.benefits))
        st.markdown("**Requirements**\n" + "\n".join(f"- {r}" for r in choice.requirements))
        st.json(asdict(UseCaseAnalyzer.analyze_complexity(choice)))
    with right:
        cost = st.number_input("Implementation cost ($)", min_value=0.0, value=defaults["cost"], step=1000.0)
        benefit = st.number_input("Annual benefit ($)", min_value=0.0, value=defaults["annual_benefit"], step=1000.0)
        try:
            roi = UseCaseAnalyzer.calculate_roi(choice, cost, benefit)
        except InvalidCostInput as exc:
            st.warning(str(exc))
        else:
            r1, r2 = st.columns(2)
            r1.metric("ROI", roi.roi)
            r2.metric("Payback", roi.payback_period)
            st.write(f"**Recommendation:** {roi.recommendation}")

    with st.expander("Implementation roadmap", expanded=False):
        for phase in UseCaseAnalyzer.generate_roadmap(choice):
            st.markdown(f"**{phase.name}** ({phase.duration})")
            st.markdown("\n".join(f"- {a}" for a in phase.activities))

    st.download_button(
        "Download JSON export",
        data=generator.export("json"),
        file_name="use_cases.json",
        mime="application/json",
    )
    st.download_button(
        "Download CSV export",
        data=generator.export("csv"),
        file_name="use_cases.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
