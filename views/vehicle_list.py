import streamlit as st

from domain.constants import PAGE_EDIT, PAGE_REGISTER, MSG_CONFIRM_DELETE, MSG_NO_MATCHES
from services.search import filter_registrations
from services.session import get_controller
from ui.components import status_message, registration_table


def _render_delete_confirmation(controller):
    pending = controller.pending_delete_id
    record = next((r for r in controller.registrations if r.get('_id') == pending), {})
    with st.container(border=True):
        st.warning(f"{MSG_CONFIRM_DELETE} ({record.get('plateNo', pending)})")
        c1, c2 = st.columns(2)
        if c1.button("Yes, delete", type="primary", key="confirm_delete"):
            with st.spinner("Deleting vehicle..."):
                controller.confirm_delete()
            st.rerun()
        if c2.button("No, keep it", key="cancel_delete"):
            controller.cancel_delete()
            st.rerun()


def view():
    controller = get_controller()

    head, action = st.columns([3, 1])
    head.subheader("Registered Vehicles")
    if action.button("Register New Vehicle", type="primary"):
        controller.navigate(PAGE_REGISTER)
        st.rerun()

    query = st.text_input("Search", key="vehicle_search", placeholder="Search vehicles...",
                          label_visibility="collapsed")

    status_message(controller.message, controller.message_is_error)

    if controller.pending_delete_id is not None:
        _render_delete_confirmation(controller)

    filtered = filter_registrations(controller.registrations, query)
    if not filtered:
        if not controller.message:
            st.caption(MSG_NO_MATCHES)
        return

    registration_table.render(filtered)
    st.caption(f"{len(filtered)} / {len(controller.registrations)} vehicles")

    # Row actions
    options = {registration_table.record_label(r): r for r in filtered}
    selected = st.selectbox("Select a vehicle", options=["-"] + list(options.keys()), key="vehicle_select")
    if selected == "-":
        return
    record = options[selected]
    c1, c2 = st.columns(2)
    if c1.button("Edit", key="edit_selected"):
        controller.navigate(PAGE_EDIT, record)
        st.rerun()
    if c2.button("Delete", key="delete_selected"):
        controller.request_delete(record.get('_id'))
        st.rerun()
