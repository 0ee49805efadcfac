"""
Pydantic models for API requests and responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.resolution import FailureKind


class ComponentInfo(BaseModel):
    """Schema for a resolved component."""

    package_name: str = Field(..., description="Package declaring the component")
    class_name: str = Field(..., description="Fully qualified class name")
    flattened: str = Field(..., description="Flattened 'package/class' form")

    @classmethod
    def from_entity(cls, component: ComponentRef):
        """Create a ComponentInfo schema from a ComponentRef entity."""
        return cls(
            package_name=component.package_name,
            class_name=component.class_name,
            flattened=component.flatten_to_string(),
        )


class ResolveAdminRequest(BaseModel):
    """Schema for device admin resolution request."""

    package_name: Optional[str] = Field(
        None, description="Package to infer the admin from"
    )
    component_name: Optional[str] = Field(
        None,
        description="Explicit admin component ('pkg/cls' or 'pkg/.Cls'); wins over package_name",
    )


class ProvisioningRequestBody(BaseModel):
    """Schema for a raw provisioning request."""

    extras: dict[str, Any] = Field(
        default_factory=dict, description="Extras of the provisioning request"
    )


class DisableComponentRequest(BaseModel):
    """Schema for disable component request."""

    component_name: str = Field(..., description="Component to disable ('pkg/cls')")


class DisableComponentResponse(BaseModel):
    """Schema for disable component response."""

    component_name: str = Field(..., description="Component targeted")
    disabled: bool = Field(..., description="Whether the component was disabled")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
    kind: Optional[FailureKind] = Field(
        None, description="Resolution failure kind, when the resolver failed"
    )
