"""Failures raised by the use case engine.

Everything here is local and synchronous: the engine raises, the immediate
caller decides. The HTTP layer maps these onto status codes in ``api.main``.
"""

from __future__ import annotations


class UseCaseEngineError(Exception):
    """Base class for engine failures."""


class DomainNotFound(UseCaseEngineError, LookupError):
    def __init__(self, domain_name: str):
        self.domain_name = domain_name
        super().__init__(f'Domain "{domain_name}" not found')


class NoTemplatesAvailable(UseCaseEngineError):
    def __init__(self, domain_name: str):
        self.domain_name = domain_name
        super().__init__(f'Domain "{domain_name}" has no use case templates')


class UseCaseNotFound(UseCaseEngineError, LookupError):
    def __init__(self, use_case_id: str):
        self.use_case_id = use_case_id
        super().__init__(f'Use case "{use_case_id}" not found')


class InvalidCostInput(UseCaseEngineError, ValueError):
    def __init__(self, field: str, value: float, reason: str = "must be a positive, finite number"):
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason} (got {value!r})")


class UnsupportedFormat(UseCaseEngineError, ValueError):
    def __init__(self, fmt: str, supported: tuple = ("json", "csv")):
        self.format = fmt
        self.supported = supported
        super().__init__(
            f'Unsupported export format "{fmt}"; expected one of: {", ".join(supported)}'
        )


__all__ = [
    "UseCaseEngineError",
    "DomainNotFound",
    "NoTemplatesAvailable",
    "UseCaseNotFound",
    "InvalidCostInput",
    "UnsupportedFormat",
]
