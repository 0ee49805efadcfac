"""
Custom exceptions for the application.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from managed_provisioning.entities.resolution import ResolutionFailure


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class PackageRegistryError(BaseAppError):
    """Exception raised for package registry errors."""

    pass


class PackageNotFoundError(PackageRegistryError):
    """Exception raised when a package is not installed in the registry."""

    def __init__(self, package_name: str):
        super().__init__(f"Package {package_name} is not installed")
        self.package_name = package_name


class ComponentNotFoundError(PackageRegistryError):
    """Exception raised when a component is not declared by its package."""

    def __init__(self, component_name: str):
        super().__init__(f"Component {component_name} cannot be found")
        self.component_name = component_name


class IllegalProvisioningArgumentError(BaseAppError):
    """
    Exception raised when the admin of a provisioning request cannot be resolved.

    Carries the failure returned by the resolver when there is one.
    """

    def __init__(self, message: str, failure: "ResolutionFailure | None" = None):
        super().__init__(message)
        self.failure = failure

    @classmethod
    def from_failure(
        cls, failure: "ResolutionFailure"
    ) -> "IllegalProvisioningArgumentError":
        error = cls(failure.detail, failure)
        error.__cause__ = failure.cause
        return error
