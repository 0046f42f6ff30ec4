from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple


@dataclass(frozen=True)
class UseCaseTemplate:
    title: str
    description: str
    benefits: Tuple[str, ...] = field(default_factory=tuple)
    requirements: Tuple[str, ...] = field(default_factory=tuple)
    priority: str = "medium"
    feasibility: str = "moderate"

    def __post_init__(self):
        object.__setattr__(self, "benefits", tuple(self.benefits))
        object.__setattr__(self, "requirements", tuple(self.requirements))


# ---------------------------------------------------------------------------
# Candidate definitions, several per domain where available
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATES: Dict[str, Tuple[UseCaseTemplate, ...]] = {
    "Customer Service": (
        UseCaseTemplate(
            title="AI-Powered 24/7 Customer Support Chatbot",
            description=(
                "Implement an intelligent chatbot that handles customer inquiries, provides "
                "instant responses, and escalates complex issues to human agents."
            ),
            benefits=(
                "24/7 availability without additional staffing costs",
                "Instant response times improving customer satisfaction",
                "Reduced workload on human agents",
                "Consistent quality of responses",
                "Multi-language support capabilities",
            ),
            requirements=(
                "Integration with existing CRM system",
                "Knowledge base development",
                "Escalation workflow design",
                "Performance monitoring dashboard",
            ),
            priority="high",
            feasibility="moderate",
        ),
        UseCaseTemplate(
            title="Automated Ticket Categorization and Routing",
            description=(
                "Use AI agents to automatically categorize support tickets and route them to "
                "the most appropriate team or agent based on content and urgency."
            ),
            benefits=(
                "Faster ticket resolution",
                "Improved agent specialization",
                "Reduced response time",
                "Better workload distribution",
            ),
            requirements=(
                "Ticket system integration",
                "Training data collection",
                "Team skill mapping",
                "Feedback mechanism",
            ),
            priority="medium",
            feasibility="easy",
        ),
    ),
    "Sales & Marketing": (
        UseCaseTemplate(
            title="Intelligent Lead Qualification Agent",
            description=(
                "Deploy an AI agent that analyzes incoming leads, scores them based on multiple "
                "criteria, and prioritizes follow-up actions for the sales team."
            ),
            benefits=(
                "Increased sales team efficiency",
                "Higher conversion rates",
                "Consistent lead evaluation",
                "Data-driven prioritization",
                "Reduced time to first contact",
            ),
            requirements=(
                "CRM integration",
                "Lead scoring model development",
                "Sales process alignment",
                "Performance metrics tracking",
            ),
            priority="high",
            feasibility="moderate",
        ),
        UseCaseTemplate(
            title="Personalized Email Campaign Generator",
            description=(
                "Create AI-powered system that generates personalized email content for different "
                "customer segments based on their behavior and preferences."
            ),
            benefits=(
                "Higher engagement rates",
                "Increased personalization at scale",
                "Time savings for marketing team",
                "A/B testing capabilities",
            ),
            requirements=(
                "Email platform integration",
                "Customer data access",
                "Content approval workflow",
                "Performance analytics",
            ),
            priority="medium",
            feasibility="moderate",
        ),
    ),
    "Operations": (
        UseCaseTemplate(
            title="Automated Invoice Processing System",
            description=(
                "Implement an AI agent that extracts data from invoices, validates information, "
                "matches with purchase orders, and routes for approval."
            ),
            benefits=(
                "Reduced manual data entry",
                "Faster processing times",
                "Improved accuracy",
                "Cost savings on administrative tasks",
                "Better cash flow management",
            ),
            requirements=(
                "OCR technology integration",
                "ERP system connection",
                "Approval workflow setup",
                "Exception handling process",
            ),
            priority="high",
            feasibility="complex",
        ),
        UseCaseTemplate(
            title="Smart Meeting Scheduler and Coordinator",
            description=(
                "Deploy an AI agent that automatically schedules meetings, finds optimal times, "
                "sends invitations, and manages rescheduling requests."
            ),
            benefits=(
                "Reduced scheduling overhead",
                "Optimal time slot selection",
                "Automated follow-ups",
                "Calendar conflict resolution",
            ),
            requirements=(
                "Calendar system integration",
                "Team availability access",
                "Meeting room booking system",
                "Notification setup",
            ),
            priority="medium",
            feasibility="easy",
        ),
    ),
    "Finance": (
        UseCaseTemplate(
            title="Automated Financial Report Generation",
            description=(
                "Create an AI system that generates comprehensive financial reports, identifies "
                "trends, and provides insights from financial data."
            ),
            benefits=(
                "Time savings for finance team",
                "Consistent report formatting",
                "Trend identification",
                "Automated distribution",
                "Real-time reporting capabilities",
            ),
            requirements=(
                "Financial system integration",
                "Report template design",
                "Data validation rules",
                "Security and compliance measures",
            ),
            priority="high",
            feasibility="moderate",
        ),
    ),
    "Human Resources": (
        UseCaseTemplate(
            title="AI-Powered Candidate Screening Assistant",
            description=(
                "Implement an AI agent that screens resumes, matches candidates to job "
                "requirements, and schedules initial interviews."
            ),
            benefits=(
                "Faster time-to-hire",
                "Reduced bias in initial screening",
                "Improved candidate matching",
                "Better candidate experience",
                "Recruiter time savings",
            ),
            requirements=(
                "ATS integration",
                "Job requirement definition",
                "Candidate communication templates",
                "Interview scheduling system",
            ),
            priority="high",
            feasibility="moderate",
        ),
    ),
    "Product Development": (
        UseCaseTemplate(
            title="Automated Bug Triaging and Assignment",
            description=(
                "Deploy an AI agent that analyzes bug reports, categorizes them, assigns severity "
                "levels, and routes to appropriate development teams."
            ),
            benefits=(
                "Faster bug resolution",
                "Consistent prioritization",
                "Better team workload balance",
                "Improved product quality",
            ),
            requirements=(
                "Bug tracking system integration",
                "Historical bug data analysis",
                "Team expertise mapping",
                "Escalation procedures",
            ),
            priority="medium",
            feasibility="moderate",
        ),
    ),
}


class TemplateLibrary:
    """Read-only lookup of candidate templates per domain name."""

    def __init__(self, templates: Mapping[str, Iterable[UseCaseTemplate]]):
        self._templates: Dict[str, Tuple[UseCaseTemplate, ...]] = {
            str(name): tuple(items) for name, items in templates.items()
        }

    def templates_for(self, domain_name: str) -> Tuple[UseCaseTemplate, ...]:
        return self._templates.get(domain_name, ())

    def domains(self) -> List[str]:
        return list(self._templates)

    def missing_for(self, domain_names: Iterable[str]) -> List[str]:
        """Names among ``domain_names`` with no template to pick from."""
        return [name for name in domain_names if not self.templates_for(name)]


def default_library() -> TemplateLibrary:
    return TemplateLibrary(DEFAULT_TEMPLATES)


__all__ = ["UseCaseTemplate", "TemplateLibrary", "DEFAULT_TEMPLATES", "default_library"]
