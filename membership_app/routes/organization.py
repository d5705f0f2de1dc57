from fastapi import APIRouter

from membership_app.services.organization import (
    OrganizationBranding,
    get_organization_branding,
)

router = APIRouter(tags=["Organization"])


@router.get("/organization", response_model=OrganizationBranding)
async def get_organization() -> OrganizationBranding:
    return get_organization_branding()
