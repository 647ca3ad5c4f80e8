import logging
import datetime as dt

import streamlit as st

from domain.constants import APP_TITLE, PAGE_LIST, PAGE_REGISTER, PAGE_EDIT
from services.session import get_config, get_controller
from ui.components import app_title

# Import the page rendering functions from the view modules
from views import vehicle_list, vehicle_form

# --- Page Registry ---
# Maps a page key to its label, rendering function, and whether the sidebar links to it.
PAGE_REGISTRY = {
    PAGE_LIST: {
        "label": "📋 Registered Vehicles",
        "render_func": vehicle_list.view,
        "sidebar": True,
    },
    PAGE_REGISTER: {
        "label": "📝 Register New Vehicle",
        "render_func": vehicle_form.register_view,
        "sidebar": True,
    },
    PAGE_EDIT: {
        "label": "✏️ Edit Vehicle",
        "render_func": vehicle_form.edit_view,
        "sidebar": False,
    },
}


def configure_logging(level: str):
    # basicConfig is a no-op after the first Streamlit rerun
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Main application router.

    Renders the page held in the controller state. Navigation goes through the
    controller so the status message is cleared on every page change.
    """
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    config = get_config()
    configure_logging(config.log_level)

    controller = get_controller()
    with st.spinner("Loading vehicles..."):
        controller.ensure_loaded()

    # --- Sidebar ---
    st.sidebar.title("Navigation")
    for key, page in PAGE_REGISTRY.items():
        if not page["sidebar"]:
            continue
        if st.sidebar.button(page["label"], key=f"nav_{key}", use_container_width=True,
                             type="primary" if controller.page == key else "secondary"):
            controller.navigate(key)
            st.rerun()
    if st.sidebar.button("🔄 Refresh", use_container_width=True):
        with st.spinner("Loading vehicles..."):
            controller.fetch_all()
        st.rerun()

    # --- Page Rendering ---
    app_title(APP_TITLE)
    page_to_render = PAGE_REGISTRY.get(controller.page, PAGE_REGISTRY[PAGE_LIST])["render_func"]
    page_to_render()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"API: {config.api_base_url} | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
