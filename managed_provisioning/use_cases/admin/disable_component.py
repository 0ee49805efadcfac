"""
Use case for disabling an application component.
"""

import logging
from typing import Optional

from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.exceptions import (
    ComponentNotFoundError,
    PackageNotFoundError,
    PackageRegistryError,
)
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)


class DisableComponentUseCase:
    """Use case for disabling a component through the package registry."""

    def __init__(
        self,
        registry: PackageRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            registry: Registry owning the component enabled state
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, component: ComponentRef) -> bool:
        """
        Disable a component.

        Args:
            component: Component to disable

        Returns:
            True if the component was disabled, False if it does not exist

        Raises:
            PackageRegistryError: If the registry fails
        """
        try:
            self._logger.info(
                f"Disabling component: {component.flatten_to_short_string()}"
            )
            self._registry.set_component_enabled(component, False)
            return True
        except (PackageNotFoundError, ComponentNotFoundError):
            self._logger.warning(
                "Component not found, not disabling it: "
                + component.flatten_to_short_string()
            )
            return False
        except PackageRegistryError:
            raise
        except Exception as e:
            self._logger.error(f"Error disabling component: {e}")
            raise PackageRegistryError(
                f"Failed to disable {component.flatten_to_short_string()}: {str(e)}"
            )
