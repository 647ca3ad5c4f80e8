import streamlit as st
from typing import Any, Dict, Optional

from domain.constants import PAGE_LIST
from domain.models import form_defaults
from services.controller import RegistrationController
from services.session import get_controller
from ui.components import status_message, registration_form


def _clear_widgets(prefix: str):
    for k in list(st.session_state.keys()):
        if k.startswith(f"{prefix}_"):
            del st.session_state[k]


def _render(controller: RegistrationController, record: Optional[Dict[str, Any]]):
    is_edit = record is not None
    st.subheader("Edit Vehicle Registration" if is_edit else "Register New Vehicle")

    status_message(controller.message, controller.message_is_error)

    key_prefix = f"edit_{record.get('_id')}" if is_edit else "register"
    submission = registration_form.render(form_defaults(record), key_prefix, is_edit=is_edit)

    if st.button("Cancel", key=f"{key_prefix}_cancel"):
        controller.navigate(PAGE_LIST)
        st.rerun()

    if submission is not None:
        # The call blocks this run, so the spinner is the loading indicator
        with st.spinner("Submitting data..."):
            if is_edit:
                ok = controller.update(record['_id'], submission)
            else:
                ok = controller.create(submission)
        if ok:
            # Next visit starts from fresh defaults
            _clear_widgets(key_prefix)
        st.rerun()


def register_view():
    _render(get_controller(), None)


def edit_view():
    controller = get_controller()
    record = controller.editing
    if not record:
        st.warning("No vehicle selected for editing.")
        if st.button("◀ Back to list"):
            controller.navigate(PAGE_LIST)
            st.rerun()
        return
    _render(controller, record)
