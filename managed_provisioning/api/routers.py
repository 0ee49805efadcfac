"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from managed_provisioning.api.dependencies import (
    get_disable_component_uc,
    get_find_device_admin_from_request_uc,
    get_resolve_device_admin_uc,
)
from managed_provisioning.api.schemas import (
    ComponentInfo,
    DisableComponentRequest,
    DisableComponentResponse,
    ErrorResponse,
    ProvisioningRequestBody,
    ResolveAdminRequest,
)
from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.provisioning_request import ProvisioningRequest
from managed_provisioning.entities.resolution import (
    FailureKind,
    ResolutionFailure,
    ResolutionInput,
    ResolutionResult,
)
from managed_provisioning.exceptions import (
    BaseAppError,
    IllegalProvisioningArgumentError,
)

router = APIRouter()

_FAILURE_STATUS = {
    FailureKind.MISSING_IDENTIFIER: 400,
    FailureKind.NO_ADMIN_FOUND: 400,
    FailureKind.AMBIGUOUS_ADMIN: 400,
    FailureKind.PACKAGE_NOT_FOUND: 404,
    FailureKind.COMPONENT_NOT_FOUND: 404,
}

_RESOLVE_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _parse_component(component_name: str) -> ComponentRef:
    try:
        return ComponentRef.unflatten_from_string(component_name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _to_response(result: ResolutionResult):
    if isinstance(result, ResolutionFailure):
        body = ErrorResponse(detail=result.detail, kind=result.kind)
        return JSONResponse(
            status_code=_FAILURE_STATUS[result.kind],
            content=body.model_dump(mode="json"),
        )
    return ComponentInfo.from_entity(result)


@router.post(
    "/device-admin/resolve",
    response_model=ComponentInfo,
    responses=_RESOLVE_RESPONSES,
)
def resolve_device_admin(body: ResolveAdminRequest):
    """
    Resolve the device admin of a package or check an explicit component.

    Args:
        body: Package name and/or explicit component name

    Returns:
        ComponentInfo: The resolved admin component

    Raises:
        HTTPException: If the component name is malformed or the registry fails
    """
    component = _parse_component(body.component_name) if body.component_name else None
    try:
        admin = get_resolve_device_admin_uc().execute_or_raise(
            ResolutionInput(package_name=body.package_name, component=component)
        )
    except IllegalProvisioningArgumentError as e:
        return _to_response(e.failure)
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _to_response(admin)


@router.post(
    "/device-admin/resolve-request",
    response_model=ComponentInfo,
    responses=_RESOLVE_RESPONSES,
)
def resolve_device_admin_from_request(body: ProvisioningRequestBody):
    """Resolve the device admin named by the extras of a provisioning request."""
    try:
        result = get_find_device_admin_from_request_uc().execute(
            ProvisioningRequest(body.extras)
        )
    except IllegalProvisioningArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _to_response(result)


@router.post(
    "/components/disable",
    response_model=DisableComponentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def disable_component(body: DisableComponentRequest):
    """
    Disable a component of an installed package.

    Unknown components are reported with disabled=false rather than an error.
    """
    component = _parse_component(body.component_name)
    try:
        disabled = get_disable_component_uc().execute(component)
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return DisableComponentResponse(
        component_name=component.flatten_to_string(), disabled=disabled
    )
