"""Project-specific exception types."""

from __future__ import annotations


class DinghyError(RuntimeError):
    """Base error for domain-level dinghy failures."""


class ProvisioningError(DinghyError):
    """Raised when creating, starting, or configuring the VM fails."""


class InspectionError(DinghyError):
    """Raised when machine inspect output is missing or lacks a field."""


class UnsupportedProviderError(DinghyError):
    """Raised for a provider name that maps to no known driver."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unsupported provider: {name!r}')


class CommandFailed(DinghyError):
    """A command run over SSH inside the VM exited nonzero."""

    def __init__(self, message: str, exitstatus: int):
        super().__init__(message)
        self.exitstatus = exitstatus
