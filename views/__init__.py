"""View modules for manual routing.

The router in `app.py` renders the page named by the controller's `page` state
instead of relying on Streamlit's automatic multi-page system. Every page
implementation lives under `views/` and exposes a no-argument render function.

Add any new page as a module with such a callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
