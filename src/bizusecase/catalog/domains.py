from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from ..errors import DomainNotFound


@dataclass(frozen=True)
class BusinessDomain:
    name: str
    description: str
    common_challenges: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but store an immutable tuple.
        object.__setattr__(self, "common_challenges", tuple(self.common_challenges))


DEFAULT_DOMAINS: Tuple[BusinessDomain, ...] = (
    BusinessDomain(
        "Customer Service",
        "Automated customer support and engagement",
        ("High volume inquiries", "Response time", "Consistency", "Availability"),
    ),
    BusinessDomain(
        "Sales & Marketing",
        "Lead generation and customer acquisition",
        ("Lead qualification", "Personalization", "Follow-up timing", "Content creation"),
    ),
    BusinessDomain(
        "Operations",
        "Process automation and efficiency",
        ("Manual tasks", "Data entry", "Coordination", "Resource allocation"),
    ),
    BusinessDomain(
        "Finance",
        "Financial analysis and reporting",
        ("Data accuracy", "Compliance", "Forecasting", "Report generation"),
    ),
    BusinessDomain(
        "Human Resources",
        "Talent management and employee engagement",
        ("Recruitment", "Onboarding", "Training", "Performance tracking"),
    ),
    BusinessDomain(
        "Product Development",
        "Innovation and product lifecycle management",
        ("Requirements gathering", "Testing", "Documentation", "Release management"),
    ),
)


class DomainCatalog:
    """Ordered, read-only registry of business domains keyed by name."""

    def __init__(self, domains: Iterable[BusinessDomain]):
        self._domains: Tuple[BusinessDomain, ...] = tuple(domains)
        self._by_name = {}
        for domain in self._domains:
            if domain.name in self._by_name:
                raise ValueError(f"Duplicate domain name: {domain.name!r}")
            self._by_name[domain.name] = domain

    @property
    def domains(self) -> Tuple[BusinessDomain, ...]:
        return self._domains

    def names(self) -> List[str]:
        return [d.name for d in self._domains]

    def lookup(self, name: str) -> Optional[BusinessDomain]:
        return self._by_name.get(name)

    def get(self, name: str) -> BusinessDomain:
        domain = self.lookup(name)
        if domain is None:
            raise DomainNotFound(name)
        return domain

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[BusinessDomain]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)


def default_catalog() -> DomainCatalog:
    return DomainCatalog(DEFAULT_DOMAINS)


__all__ = ["BusinessDomain", "DomainCatalog", "DEFAULT_DOMAINS", "default_catalog"]
