"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from managed_provisioning.container import container
from managed_provisioning.use_cases.admin.disable_component import (
    DisableComponentUseCase,
)
from managed_provisioning.use_cases.admin.find_device_admin_from_request import (
    FindDeviceAdminFromRequestUseCase,
)
from managed_provisioning.use_cases.admin.resolve_device_admin import (
    ResolveDeviceAdminUseCase,
)


def get_resolve_device_admin_uc() -> ResolveDeviceAdminUseCase:
    """
    Get the resolve device admin use case from the container.

    Returns:
        ResolveDeviceAdminUseCase: The resolve device admin use case instance
    """
    return container.get_resolve_device_admin_use_case()


def get_find_device_admin_from_request_uc() -> FindDeviceAdminFromRequestUseCase:
    """
    Get the request-based resolution use case from the container.

    Returns:
        FindDeviceAdminFromRequestUseCase: The use case instance
    """
    return container.get_find_device_admin_from_request_use_case()


def get_disable_component_uc() -> DisableComponentUseCase:
    """
    Get the disable component use case from the container.

    Returns:
        DisableComponentUseCase: The disable component use case instance
    """
    return container.get_disable_component_use_case()
