from __future__ import annotations

from dataclasses import asdict
from typing import Dict, List, Optional

from bizusecase.engine import UseCaseAnalyzer, UseCaseGenerator


class PortfolioService:
    """Bridges HTTP bodies and the engine: looks use cases up, returns plain dicts."""

    def __init__(self, generator: UseCaseGenerator):
        self.generator = generator

    def list_domains(self) -> List[Dict]:
        return [
            {
                "name": d.name,
                "description": d.description,
                "common_challenges": list(d.common_challenges),
            }
            for d in self.generator.domains
        ]

    def generate(self, domain: str, custom_challenge: Optional[str] = None) -> Dict:
        use_case = self.generator.generate_for_domain(domain, custom_challenge)
        return use_case.to_record()

    def list_use_cases(self, domain: Optional[str] = None) -> List[Dict]:
        if domain is None:
            use_cases = self.generator.get_all()
        else:
            use_cases = self.generator.get_by_domain(domain)
        return [uc.to_record() for uc in use_cases]

    def top(self, count: int) -> List[Dict]:
        return [uc.to_record() for uc in self.generator.get_top(count)]

    def get(self, use_case_id: str) -> Dict:
        return self.generator.get_by_id(use_case_id).to_record()

    def analysis(self) -> Dict:
        return asdict(self.generator.analyze())

    def export(self, fmt: str) -> str:
        return self.generator.export(fmt)

    def complexity(self, use_case_id: str) -> Dict:
        use_case = self.generator.get_by_id(use_case_id)
        return asdict(UseCaseAnalyzer.analyze_complexity(use_case))

    def roadmap(self, use_case_id: str) -> Dict:
        use_case = self.generator.get_by_id(use_case_id)
        phases = UseCaseAnalyzer.generate_roadmap(use_case)
        return {
            "use_case_id": use_case.id,
            "title": use_case.title,
            "phases": [
                {"name": p.name, "duration": p.duration, "activities": list(p.activities)}
                for p in phases
            ],
        }

    def roi(self, use_case_id: str, cost: float, annual_benefit: float) -> Dict:
        use_case = self.generator.get_by_id(use_case_id)
        result = UseCaseAnalyzer.calculate_roi(use_case, cost, annual_benefit)
        return {
            "use_case_id": use_case.id,
            "cost": cost,
            "annual_benefit": annual_benefit,
            **asdict(result),
        }
