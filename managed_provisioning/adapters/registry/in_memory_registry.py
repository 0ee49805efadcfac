"""
In-memory package registry adapter.
"""

import logging
from typing import Iterable, Mapping, Optional

from typing_extensions import override

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.manifest import ManifestSnapshot, ReceiverDescriptor
from managed_provisioning.exceptions import (
    ComponentNotFoundError,
    PackageNotFoundError,
)
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)


class InMemoryPackageRegistry(PackageRegistryPort):
    """Package registry holding manifests in memory."""

    def __init__(
        self,
        packages: Optional[Mapping[str, Iterable[ReceiverDescriptor]]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the registry.

        Args:
            packages: Mapping of package name to its declared receivers
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._packages: dict[str, tuple[ReceiverDescriptor, ...]] = {}
        self._disabled: set[ComponentRef] = set()
        for package_name, receivers in (packages or {}).items():
            self.install(package_name, receivers)

    def install(
        self, package_name: str, receivers: Iterable[ReceiverDescriptor]
    ) -> None:
        """Add or replace the manifest of a package."""
        self._packages[package_name] = tuple(receivers)

    def is_component_enabled(self, component: ComponentRef) -> bool:
        return component not in self._disabled

    @override
    def get_manifest_snapshot(self, package_name: str) -> ManifestSnapshot:
        receivers = self._packages.get(package_name)
        if receivers is None:
            raise PackageNotFoundError(package_name)
        return ManifestSnapshot.of(package_name, receivers)

    @override
    def set_component_enabled(self, component: ComponentRef, enabled: bool) -> None:
        snapshot = self.get_manifest_snapshot(component.package_name)
        if snapshot.find_receiver(component.class_name) is None:
            raise ComponentNotFoundError(component.flatten_to_short_string())

        if enabled:
            self._disabled.discard(component)
        else:
            self._disabled.add(component)
        self._logger.info(
            f"Component {component.flatten_to_short_string()} "
            f"{'enabled' if enabled else 'disabled'}"
        )
