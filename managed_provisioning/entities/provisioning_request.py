"""
Provisioning request domain entity.
"""

from typing import Any, Mapping, Optional

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.resolution import ResolutionInput
from managed_provisioning.exceptions import IllegalProvisioningArgumentError

EXTRA_PROVISIONING_DEVICE_ADMIN_COMPONENT_NAME = (
    "android.app.extra.PROVISIONING_DEVICE_ADMIN_COMPONENT_NAME"
)
EXTRA_PROVISIONING_DEVICE_ADMIN_PACKAGE_NAME = (
    "android.app.extra.PROVISIONING_DEVICE_ADMIN_PACKAGE_NAME"
)


class ProvisioningRequest:
    """
    Inbound provisioning request carrying its extras.
    """

    def __init__(self, extras: Optional[Mapping[str, Any]] = None):
        """
        Initialize the ProvisioningRequest entity.

        Args:
            extras: Key/value extras of the request. The admin component is
                expected flattened ("pkg/cls") or already as a ComponentRef.
        """
        self.extras: dict[str, Any] = dict(extras or {})

    def get_admin_package_name(self) -> Optional[str]:
        value = self.extras.get(EXTRA_PROVISIONING_DEVICE_ADMIN_PACKAGE_NAME)
        if value is None:
            return None
        if not isinstance(value, str):
            raise IllegalProvisioningArgumentError(
                f"Invalid admin package name: {value!r}"
            )
        return value or None

    def get_admin_component(self) -> Optional[ComponentRef]:
        """
        Get the admin component named by the request, if any.

        Raises:
            IllegalProvisioningArgumentError: If the component extra is malformed
        """
        value = self.extras.get(EXTRA_PROVISIONING_DEVICE_ADMIN_COMPONENT_NAME)
        if value is None or isinstance(value, ComponentRef):
            return value
        if not isinstance(value, str):
            raise IllegalProvisioningArgumentError(
                f"Invalid admin component name: {value!r}"
            )
        try:
            return ComponentRef.unflatten_from_string(value)
        except ValueError as e:
            raise IllegalProvisioningArgumentError(str(e)) from e

    def to_resolution_input(self) -> ResolutionInput:
        return ResolutionInput(
            package_name=self.get_admin_package_name(),
            component=self.get_admin_component(),
        )

    def __str__(self) -> str:
        return f"ProvisioningRequest(extras={sorted(self.extras)})"
