"""
Use case for resolving the device admin named by a provisioning request.
"""

import logging
from typing import Optional

from managed_provisioning.entities.provisioning_request import ProvisioningRequest
from managed_provisioning.entities.resolution import ResolutionResult
from managed_provisioning.use_cases.admin.resolve_device_admin import (
    ResolveDeviceAdminUseCase,
)


class FindDeviceAdminFromRequestUseCase:
    """Extract the admin identifiers from a request and resolve them."""

    def __init__(
        self,
        resolver: ResolveDeviceAdminUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: ProvisioningRequest) -> ResolutionResult:
        """
        Raises:
            IllegalProvisioningArgumentError: If the request extras are malformed
        """
        resolution_input = request.to_resolution_input()
        self._logger.info(
            f"Resolving admin from request: package={resolution_input.package_name}, "
            f"component={resolution_input.component}"
        )
        return self._resolver.execute(resolution_input)
