"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like the CSS injector, title and status line.
- `registration_form`: The create/edit vehicle form.
- `registration_table`: The searchable registrations table.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    app_title,
    status_message,
)

from . import registration_form, registration_table
