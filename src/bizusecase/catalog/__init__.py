"""Static reference data: business domains and per-domain use case templates."""

from .domains import DEFAULT_DOMAINS, BusinessDomain, DomainCatalog, default_catalog
from .templates import DEFAULT_TEMPLATES, TemplateLibrary, UseCaseTemplate, default_library

__all__ = [
    "BusinessDomain",
    "DomainCatalog",
    "DEFAULT_DOMAINS",
    "default_catalog",
    "UseCaseTemplate",
    "TemplateLibrary",
    "DEFAULT_TEMPLATES",
    "default_library",
]
