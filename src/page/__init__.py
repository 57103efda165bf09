"""Page-level plumbing: location, credential form and the viewer control flow."""

from src.page.credential_form import CredentialForm
from src.page.location import Location
from src.page.viewer import ViewerPage

__all__ = ["CredentialForm", "Location", "ViewerPage"]
