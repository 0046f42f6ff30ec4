from __future__ import annotations

import json
import logging
import random
import threading
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

from ..catalog.domains import BusinessDomain, DomainCatalog, default_catalog
from ..catalog.templates import TemplateLibrary, UseCaseTemplate, default_library
from ..errors import (
    DomainNotFound,
    NoTemplatesAvailable,
    UnsupportedFormat,
    UseCaseNotFound,
)
from .usecase import UseCase, utcnow

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")

RECORD_COLUMNS = [
    "id",
    "title",
    "domain",
    "description",
    "benefits",
    "requirements",
    "priority",
    "feasibility",
    "score",
    "created_at",
]


@dataclass
class PortfolioAnalysis:
    total_use_cases: int = 0
    by_domain: Dict[str, int] = field(default_factory=dict)
    by_priority: Dict[str, int] = field(default_factory=dict)
    by_feasibility: Dict[str, int] = field(default_factory=dict)
    average_score: float = 0.0


class UseCaseGenerator:
    """
    Builds use cases from the template library and keeps every one it builds.

    The collection is append-only and kept in insertion order. One lock covers
    appends and reads, so analysis calls always see a whole collection.
    """

    def __init__(
        self,
        catalog: Optional[DomainCatalog] = None,
        templates: Optional[TemplateLibrary] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.catalog = catalog or default_catalog()
        self.templates = templates or default_library()
        self.rng = rng or random.Random()
        self.clock = clock or utcnow
        self._use_cases: List[UseCase] = []
        self._lock = threading.RLock()

        missing = self.templates.missing_for(self.catalog.names())
        if missing:
            raise NoTemplatesAvailable(missing[0])

    @property
    def domains(self) -> Tuple[BusinessDomain, ...]:
        return self.catalog.domains

    def generate_for_domain(
        self, domain_name: str, custom_challenge: Optional[str] = None
    ) -> UseCase:
        domain = self.catalog.lookup(domain_name)
        if domain is None:
            raise DomainNotFound(domain_name)

        candidates = self.templates.templates_for(domain.name)
        if not candidates:
            raise NoTemplatesAvailable(domain.name)
        if custom_challenge:
            # Reserved: the challenge does not steer selection yet.
            logger.debug("Custom challenge for %s ignored: %s", domain.name, custom_challenge)

        with self._lock:
            template: UseCaseTemplate = self.rng.choice(candidates)
            use_case = UseCase(
                template.title,
                domain.name,
                template.description,
                template.benefits,
                template.requirements,
                created_at=self.clock(),
            )
            use_case.set_priority(template.priority).set_feasibility(template.feasibility)
            self._use_cases.append(use_case)

        logger.info("Generated %s for %s: %s", use_case.id, domain.name, use_case.title)
        return use_case

    def get_all(self) -> List[UseCase]:
        with self._lock:
            return list(self._use_cases)

    def get_by_domain(self, domain_name: str) -> List[UseCase]:
        with self._lock:
            return [uc for uc in self._use_cases if uc.domain == domain_name]

    def get_by_id(self, use_case_id: str) -> UseCase:
        with self._lock:
            for uc in self._use_cases:
                if uc.id == use_case_id:
                    return uc
        raise UseCaseNotFound(use_case_id)

    def get_top(self, count: int = 5) -> List[UseCase]:
        if count < 1:
            raise ValueError(f"count must be a positive integer (got {count})")
        with self._lock:
            # sorted() is stable: equal scores keep insertion order.
            ranked = sorted(self._use_cases, key=lambda uc: uc.calculate_score(), reverse=True)
        return ranked[:count]

    def analyze(self) -> PortfolioAnalysis:
        with self._lock:
            by_domain: Counter = Counter()
            by_priority: Counter = Counter()
            by_feasibility: Counter = Counter()
            total_score = 0.0
            for uc in self._use_cases:
                by_domain[uc.domain] += 1
                by_priority[uc.priority] += 1
                by_feasibility[uc.feasibility] += 1
                total_score += uc.calculate_score()
            total = len(self._use_cases)

        return PortfolioAnalysis(
            total_use_cases=total,
            by_domain=dict(by_domain),
            by_priority=dict(by_priority),
            by_feasibility=dict(by_feasibility),
            average_score=total_score / total if total else 0.0,
        )

    def export(self, fmt: str = "json") -> str:
        if fmt not in EXPORT_FORMATS:
            raise UnsupportedFormat(fmt, EXPORT_FORMATS)
        with self._lock:
            records = [uc.to_record() for uc in self._use_cases]

        if fmt == "json":
            return json.dumps(records, indent=2)

        df = pd.DataFrame(records, columns=RECORD_COLUMNS)
        for col in ("benefits", "requirements"):
            df[col] = df[col].map(lambda items: "; ".join(items))
        return df.to_csv(index=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._use_cases)


__all__ = ["UseCaseGenerator", "PortfolioAnalysis", "EXPORT_FORMATS", "RECORD_COLUMNS"]
