"""
Browser automation for the Angular frontend
"""

from petclinic_e2e.ui.browser import BrowserSession, BrowserUnavailableError, frontend_reachable
from petclinic_e2e.ui.pages import (
    NavigationBar,
    OwnerForm,
    OwnerList,
    OwnerDetails,
    PetForm,
    PetList,
    VetForm,
    VetList,
)

__all__ = [
    "BrowserSession",
    "BrowserUnavailableError",
    "frontend_reachable",
    "NavigationBar",
    "OwnerForm",
    "OwnerList",
    "OwnerDetails",
    "PetForm",
    "PetList",
    "VetForm",
    "VetList",
]
