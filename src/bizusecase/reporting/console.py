from __future__ import annotations

from typing import Iterable, List, Sequence

from ..catalog.domains import BusinessDomain
from ..engine.analyzer import RoadmapPhase, RoiResult, estimate_effort
from ..engine.generator import PortfolioAnalysis
from ..engine.usecase import UseCase

RULE = "=" * 64


def banner(title: str) -> str:
    return f"{RULE}\n{title}\n{RULE}"


def format_domains(domains: Iterable[BusinessDomain]) -> str:
    lines = ["Available business domains:", ""]
    for i, domain in enumerate(domains, start=1):
        lines.append(f"{i}. {domain.name} - {domain.description}")
        lines.append(f"   Challenges: {', '.join(domain.common_challenges)}")
    return "\n".join(lines)


def format_use_case(use_case: UseCase) -> str:
    lines = [
        f"{use_case.title}",
        f"  ID:          {use_case.id}",
        f"  Domain:      {use_case.domain}",
        f"  Priority:    {use_case.priority}",
        f"  Feasibility: {use_case.feasibility} ({estimate_effort(use_case)})",
        f"  Score:       {use_case.calculate_score():.2f}",
        "",
        f"  {use_case.description}",
        "",
        "  Benefits:",
    ]
    lines += [f"    + {b}" for b in use_case.benefits]
    lines.append("  Requirements:")
    lines += [f"    - {r}" for r in use_case.requirements]
    return "\n".join(lines)


def format_ranking(use_cases: Sequence[UseCase], detailed: bool = False) -> str:
    if not use_cases:
        return "No use cases generated yet."
    lines: List[str] = []
    for i, uc in enumerate(use_cases, start=1):
        if detailed:
            lines.append(f"{i}. {uc.title}")
            lines.append(f"   Domain: {uc.domain}")
            lines.append(f"   Priority: {uc.priority} | Feasibility: {uc.feasibility}")
            lines.append(f"   Score: {uc.calculate_score():.2f}")
        else:
            lines.append(f"{i}. {uc.title} [{uc.domain}] - Score: {uc.calculate_score():.2f}")
    return "\n".join(lines)


def _counts(title: str, counts: dict) -> List[str]:
    lines = [f"{title}:"]
    if not counts:
        lines.append("  (none)")
    for key, value in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"  {key}: {value}")
    return lines


def format_analysis(analysis: PortfolioAnalysis) -> str:
    lines = [
        f"Total use cases: {analysis.total_use_cases}",
        f"Average score:   {analysis.average_score:.2f}",
        "",
    ]
    lines += _counts("By domain", analysis.by_domain)
    lines += _counts("By priority", analysis.by_priority)
    lines += _counts("By feasibility", analysis.by_feasibility)
    return "\n".join(lines)


def format_roadmap(phases: Sequence[RoadmapPhase]) -> str:
    lines: List[str] = []
    for phase in phases:
        lines.append(f"Phase: {phase.name} ({phase.duration})")
        lines += [f"  * {activity}" for activity in phase.activities]
        lines.append("")
    return "\n".join(lines).rstrip()


def format_roi(result: RoiResult, cost: float, annual_benefit: float) -> str:
    return "\n".join(
        [
            f"  Investment:     ${cost:,.0f}",
            f"  Annual benefit: ${annual_benefit:,.0f}",
            f"  ROI:            {result.roi}",
            f"  Payback period: {result.payback_period}",
            f"  Recommendation: {result.recommendation}",
        ]
    )


__all__ = [
    "banner",
    "format_domains",
    "format_use_case",
    "format_ranking",
    "format_analysis",
    "format_roadmap",
    "format_roi",
]
