"""
Package registry port interface defining the contract for manifest lookups.
"""

from abc import ABC, abstractmethod

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.manifest import ManifestSnapshot


class PackageRegistryPort(ABC):
    """Port interface for the package registry of the device."""

    @abstractmethod
    def get_manifest_snapshot(self, package_name: str) -> ManifestSnapshot:
        """
        Read the receivers declared by an installed package.

        Args:
            package_name: Name of the package to look up

        Returns:
            ManifestSnapshot with every declared receiver and its permission
            ("" when none is declared)

        Raises:
            PackageNotFoundError: If the package is not installed
            PackageRegistryError: If the registry cannot be read
        """
        pass

    @abstractmethod
    def set_component_enabled(self, component: ComponentRef, enabled: bool) -> None:
        """
        Enable or disable a component without killing its application.

        Args:
            component: Component to update
            enabled: New enabled state

        Raises:
            PackageNotFoundError: If the component's package is not installed
            ComponentNotFoundError: If the package does not declare the component
        """
        pass
