"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from managed_provisioning.adapters.registry.in_memory_registry import (
    InMemoryPackageRegistry,
)
from managed_provisioning.adapters.registry.json_manifest_registry import (
    JsonManifestPackageRegistry,
)
from managed_provisioning.config.settings import settings
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)
from managed_provisioning.use_cases.admin.disable_component import (
    DisableComponentUseCase,
)
from managed_provisioning.use_cases.admin.find_device_admin_from_request import (
    FindDeviceAdminFromRequestUseCase,
)
from managed_provisioning.use_cases.admin.resolve_device_admin import (
    ResolveDeviceAdminUseCase,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, registry_path: Optional[str] = None):
        self._instances = {}
        self._registry_path = registry_path
        self._logger = logging.getLogger(__name__)

    @property
    def registry_path(self) -> Optional[str]:
        return self._registry_path or settings.registry_path

    def get_package_registry(self) -> PackageRegistryPort:
        """
        Get package registry adapter instance.

        A JSON registry is used when a registry path is configured, an empty
        in-memory registry otherwise.

        Returns:
            PackageRegistryPort implementation
        """
        if "package_registry" not in self._instances:
            if self.registry_path:
                self._instances["package_registry"] = JsonManifestPackageRegistry(
                    self.registry_path, logger=self._logger
                )
            else:
                self._logger.warning(
                    "No registry path configured, using an empty registry"
                )
                self._instances["package_registry"] = InMemoryPackageRegistry(
                    logger=self._logger
                )
        return self._instances["package_registry"]

    def set_package_registry(self, registry: PackageRegistryPort) -> None:
        """Replace the registry and drop every use case built on the old one."""
        self.reset()
        self._instances["package_registry"] = registry

    def get_resolve_device_admin_use_case(self) -> ResolveDeviceAdminUseCase:
        """
        Get resolve device admin use case with injected dependencies.

        Returns:
            Configured ResolveDeviceAdminUseCase
        """
        if "resolve_device_admin_use_case" not in self._instances:
            registry = self.get_package_registry()
            self._instances["resolve_device_admin_use_case"] = (
                ResolveDeviceAdminUseCase(registry, self._logger)
            )
        return self._instances["resolve_device_admin_use_case"]

    def get_find_device_admin_from_request_use_case(
        self,
    ) -> FindDeviceAdminFromRequestUseCase:
        if "find_device_admin_from_request_use_case" not in self._instances:
            resolver = self.get_resolve_device_admin_use_case()
            self._instances["find_device_admin_from_request_use_case"] = (
                FindDeviceAdminFromRequestUseCase(resolver, self._logger)
            )
        return self._instances["find_device_admin_from_request_use_case"]

    def get_disable_component_use_case(self) -> DisableComponentUseCase:
        """
        Get disable component use case with injected dependencies.

        Returns:
            Configured DisableComponentUseCase
        """
        if "disable_component_use_case" not in self._instances:
            registry = self.get_package_registry()
            self._instances["disable_component_use_case"] = DisableComponentUseCase(
                registry, self._logger
            )
        return self._instances["disable_component_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
