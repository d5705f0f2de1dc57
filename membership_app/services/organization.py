import os

from dotenv import load_dotenv
from sqlmodel import SQLModel

load_dotenv()

DEFAULT_ORGANIZATION_NAME = "Hockey Association"
DEFAULT_SUPPORT_EMAIL = "support@example.com"
DEFAULT_SITE_URL = "http://localhost:3000"


class OrganizationBranding(SQLModel):
    name: str
    support_email: str
    site_url: str


def get_organization_branding() -> OrganizationBranding:
    """Branding strings, read on every call so that env changes are picked up."""
    return OrganizationBranding(
        name=os.getenv("ORGANIZATION_NAME") or DEFAULT_ORGANIZATION_NAME,
        support_email=os.getenv("SUPPORT_EMAIL") or DEFAULT_SUPPORT_EMAIL,
        site_url=(os.getenv("SITE_URL") or DEFAULT_SITE_URL).rstrip("/"),
    )
