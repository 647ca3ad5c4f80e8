"""Client state controller: the only place that talks to the backend.

State lives in a mutable mapping (``st.session_state`` in the app, a plain
dict in tests) under these keys:

- ``page``: ``list`` | ``register`` | ``edit``
- ``registrations``: cached record dicts, replaced wholesale by every fetch
- ``editing``: record dict being edited, or None
- ``loading``: True while a backend call is in flight
- ``message`` / ``message_is_error``: the single user-visible status line
- ``pending_delete_id``: id awaiting confirmation, or None
- ``loaded``: whether the first fetch of the session has run

Every mutation is followed by a full re-fetch rather than a local patch.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, MutableMapping, Optional

from domain.constants import PAGES, PAGE_LIST, PAGE_EDIT, MSG_CREATED, MSG_UPDATED, MSG_DELETED
from domain.models import VehicleRegistration
from services.api import RegistrationApiError, RegistrationClient

logger = logging.getLogger(__name__)

_DEFAULTS = {
    'page': PAGE_LIST,
    'registrations': [],
    'editing': None,
    'loading': False,
    'message': '',
    'message_is_error': False,
    'pending_delete_id': None,
    'loaded': False,
}


def _success_text(result: Dict[str, Any], fallback: str) -> str:
    # Some endpoints answer `success: true` rather than a message
    text = result.get('success')
    return text if isinstance(text, str) and text else fallback


class RegistrationController:
    def __init__(self, state: MutableMapping[str, Any], client: RegistrationClient):
        self.state = state
        self.client = client
        for key, default in _DEFAULTS.items():
            if key not in state:
                state[key] = list(default) if isinstance(default, list) else default

    # --- read-only views of the state ---

    @property
    def page(self) -> str:
        return self.state['page']

    @property
    def registrations(self) -> List[Dict[str, Any]]:
        return self.state['registrations']

    @property
    def editing(self) -> Optional[Dict[str, Any]]:
        return self.state['editing']

    @property
    def loading(self) -> bool:
        return self.state['loading']

    @property
    def message(self) -> str:
        return self.state['message']

    @property
    def message_is_error(self) -> bool:
        return self.state['message_is_error']

    @property
    def pending_delete_id(self) -> Optional[str]:
        return self.state['pending_delete_id']

    # --- helpers ---

    def _set_message(self, text: str, error: bool = False):
        self.state['message'] = text
        self.state['message_is_error'] = error

    def _begin(self):
        self.state['loading'] = True
        self._set_message('')

    def _refresh_then_report(self, success_text: str):
        # Keep the fetch error if the refresh fails, else show the success text
        if self.fetch_all():
            self._set_message(success_text)

    # --- navigation ---

    def navigate(self, page: str, registration: Optional[Dict[str, Any]] = None):
        if page not in PAGES:
            raise ValueError(f"Unknown page: {page}")
        self.state['page'] = page
        self.state['editing'] = registration if page == PAGE_EDIT else None
        self.state['pending_delete_id'] = None
        self._set_message('')

    # --- backend operations ---

    def ensure_loaded(self):
        """Fetch the record set once per session (first render)."""
        if not self.state['loaded']:
            self.state['loaded'] = True
            self.fetch_all()

    def fetch_all(self) -> bool:
        self._begin()
        try:
            self.state['registrations'] = self.client.list_registrations()
            return True
        except RegistrationApiError as e:
            logger.error("Error fetching vehicles: %s", e)
            self._set_message(f"Error fetching vehicles: {e}", error=True)
            return False
        finally:
            self.state['loading'] = False

    def create(self, registration: VehicleRegistration) -> bool:
        self._begin()
        try:
            result = self.client.create_registration(registration)
        except RegistrationApiError as e:
            logger.error("Error adding vehicle: %s", e)
            self._set_message(str(e), error=True)
            return False
        else:
            self._refresh_then_report(_success_text(result, MSG_CREATED))
            self.state['page'] = PAGE_LIST
            return True
        finally:
            self.state['loading'] = False

    def update(self, registration_id: str, registration: VehicleRegistration) -> bool:
        self._begin()
        try:
            result = self.client.update_registration(registration_id, registration)
        except RegistrationApiError as e:
            logger.error("Error updating vehicle %s: %s", registration_id, e)
            self._set_message(str(e), error=True)
            return False
        else:
            self._refresh_then_report(_success_text(result, MSG_UPDATED))
            self.state['page'] = PAGE_LIST
            self.state['editing'] = None
            return True
        finally:
            self.state['loading'] = False

    def remove(self, registration_id: str, confirmed: bool = False) -> bool:
        """Delete a record. Without explicit confirmation nothing is sent."""
        if not confirmed:
            logger.info("Delete of %s not confirmed; skipping", registration_id)
            self._set_message('')
            return False
        self._begin()
        try:
            result = self.client.delete_registration(registration_id)
        except RegistrationApiError as e:
            logger.error("Error deleting vehicle %s: %s", registration_id, e)
            self._set_message(str(e), error=True)
            return False
        else:
            self._refresh_then_report(_success_text(result, MSG_DELETED))
            return True
        finally:
            self.state['loading'] = False

    # --- two-step delete confirmation used by the list view ---

    def request_delete(self, registration_id: str):
        self.state['pending_delete_id'] = registration_id
        self._set_message('')

    def cancel_delete(self):
        self.state['pending_delete_id'] = None
        self._set_message('')

    def confirm_delete(self) -> bool:
        registration_id = self.state['pending_delete_id']
        self.state['pending_delete_id'] = None
        if registration_id is None:
            return False
        return self.remove(registration_id, confirmed=True)
