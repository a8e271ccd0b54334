"""Views: state owners driven by UI events and lifecycle hooks.

Each view owns explicit state records (``core.domain.state``) and talks to
the API only through ``core.interfaces.resource_client.ResourceClient``.
"""

from core.views.basic_fetch import BasicFetchView
from core.views.crud_form import CrudFormView
from core.views.dependent_fetch import DependentFetchView
from core.views.root import RootView

__all__ = [
    "BasicFetchView",
    "CrudFormView",
    "DependentFetchView",
    "RootView",
]
