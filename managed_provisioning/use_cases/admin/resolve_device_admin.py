"""
Use case for resolving the device-admin component of a package.
"""

import logging
from typing import Optional

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.manifest import ManifestSnapshot
from managed_provisioning.entities.resolution import (
    BIND_DEVICE_ADMIN,
    FailureKind,
    ResolutionFailure,
    ResolutionInput,
    ResolutionResult,
)
from managed_provisioning.exceptions import (
    IllegalProvisioningArgumentError,
    PackageNotFoundError,
    PackageRegistryError,
)
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)


class ResolveDeviceAdminUseCase:
    """
    Check the admin component supplied, or infer it from the package.

    If a component is supplied, the package name is ignored: the component's
    package must be installed and declare the component as a receiver.
    Otherwise the package must be installed and declare exactly one receiver
    guarded by BIND_DEVICE_ADMIN. Lookup by package name is kept for legacy
    callers.
    """

    def __init__(
        self,
        registry: PackageRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            registry: Registry to read package manifests from
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, resolution_input: ResolutionInput) -> ResolutionResult:
        """
        Resolve the admin component.

        Args:
            resolution_input: Package name and/or explicit component

        Returns:
            The admin ComponentRef, or a ResolutionFailure describing why none
            could be resolved

        Raises:
            PackageRegistryError: If the registry fails for another reason than
                a missing package
        """
        package_name = resolution_input.effective_package_name
        if not package_name:
            return self._fail(
                FailureKind.MISSING_IDENTIFIER,
                "Neither the package name nor the component name of the admin are supplied",
            )

        try:
            self._logger.info(f"Reading manifest of package: {package_name}")
            snapshot = self._registry.get_manifest_snapshot(package_name)
        except PackageNotFoundError as e:
            return self._fail(
                FailureKind.PACKAGE_NOT_FOUND,
                f"Mdm {package_name} is not installed",
                cause=e,
            )
        except PackageRegistryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading manifest of {package_name}: {e}")
            raise PackageRegistryError(
                f"Failed to read manifest of {package_name}: {str(e)}"
            )

        if resolution_input.component is not None:
            return self._check_admin_component(resolution_input.component, snapshot)
        return self._find_admin_in_package(package_name, snapshot)

    def execute_or_raise(self, resolution_input: ResolutionInput) -> ComponentRef:
        """
        Resolve the admin component, raising on failure.

        Raises:
            IllegalProvisioningArgumentError: If no admin can be resolved
        """
        result = self.execute(resolution_input)
        if isinstance(result, ResolutionFailure):
            raise IllegalProvisioningArgumentError.from_failure(result)
        return result

    def _check_admin_component(
        self, component: ComponentRef, snapshot: ManifestSnapshot
    ) -> ResolutionResult:
        # The binding permission is not checked for a caller-supplied component
        if snapshot.find_receiver(component.class_name) is None:
            return self._fail(
                FailureKind.COMPONENT_NOT_FOUND,
                f"The component {component.flatten_to_short_string()} cannot be found",
            )
        self._logger.info(f"Admin component found: {component.flatten_to_short_string()}")
        return component

    def _find_admin_in_package(
        self, package_name: str, snapshot: ManifestSnapshot
    ) -> ResolutionResult:
        candidates = snapshot.receivers_requiring(BIND_DEVICE_ADMIN)

        if not candidates:
            return self._fail(
                FailureKind.NO_ADMIN_FOUND,
                f"There are no device admins in {package_name}",
            )
        if len(candidates) > 1:
            return self._fail(
                FailureKind.AMBIGUOUS_ADMIN,
                f"There are several device admins in {package_name} but none is specified",
            )

        admin = ComponentRef(package_name, candidates[0].class_name)
        self._logger.info(f"Inferred admin component: {admin.flatten_to_short_string()}")
        return admin

    def _fail(
        self,
        kind: FailureKind,
        detail: str,
        cause: Optional[BaseException] = None,
    ) -> ResolutionFailure:
        self._logger.warning(f"Cannot resolve device admin: {detail}")
        return ResolutionFailure(kind, detail, cause)
