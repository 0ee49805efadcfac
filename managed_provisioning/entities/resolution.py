"""
Resolution input and result types for device-admin lookup.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from managed_provisioning.entities.component import ComponentRef

# Permission a receiver must declare to be eligible as a device admin.
BIND_DEVICE_ADMIN = "android.permission.BIND_DEVICE_ADMIN"


@dataclass(frozen=True)
class ResolutionInput:
    """
    Identifiers supplied by the caller.

    When a component is given, its package wins over package_name.
    """

    package_name: Optional[str] = None
    component: Optional[ComponentRef] = None

    @property
    def effective_package_name(self) -> Optional[str]:
        if self.component is not None:
            return self.component.package_name
        return self.package_name or None


class FailureKind(str, Enum):
    """Reasons why no admin component could be resolved."""

    MISSING_IDENTIFIER = "missing_identifier"
    PACKAGE_NOT_FOUND = "package_not_found"
    COMPONENT_NOT_FOUND = "component_not_found"
    NO_ADMIN_FOUND = "no_admin_found"
    AMBIGUOUS_ADMIN = "ambiguous_admin"


@dataclass(frozen=True)
class ResolutionFailure:
    """A failed resolution: the kind, a diagnostic detail and the underlying cause."""

    kind: FailureKind
    detail: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


ResolutionResult = Union[ComponentRef, ResolutionFailure]
