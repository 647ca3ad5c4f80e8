import streamlit as st

PRIMARY_ACCENT = "#4338CA"  # indigo-700


def inject_base_css():
    # Streamlit drops injected markup on rerun, so this runs on every render
    st.markdown(
        f"""
        <style>
        .app-title {{
            text-align:center; font-size:2.2rem; font-weight:800;
            color:{PRIMARY_ACCENT}; letter-spacing:-0.5px; margin-bottom:1.2rem;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def app_title(text: str):
    inject_base_css()
    st.markdown(f"<div class='app-title'>{text}</div>", unsafe_allow_html=True)


def status_message(text: str, is_error: bool = False):
    """Single status line shared by every page; nothing when empty."""
    if not text:
        return
    if is_error:
        st.error(text)
    else:
        st.success(text)

