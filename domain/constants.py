"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for field names, labels, pages and messages.
"""
import datetime as _dt

APP_TITLE = "Vehicle Registration System"

# Page keys handled by the router in app.py
PAGE_LIST = "list"
PAGE_REGISTER = "register"
PAGE_EDIT = "edit"
PAGES = (PAGE_LIST, PAGE_REGISTER, PAGE_EDIT)

# Wire key -> table / form label, in display order
FIELD_LABELS = {
    "ownerId": "Owner ID",
    "plateNo": "License Plate",
    "manufacturer": "Manufacturer",
    "model": "Model",
    "manufacturedYear": "Manufactured Year",
    "vehicle": "Vehicle Type",
    "color": "Color",
    "owner": "Owner",
    "registrationDate": "Registration Date",
}

REQUIRED_FIELDS = ("ownerId", "plateNo", "manufacturer", "vehicle", "owner")

MIN_MANUFACTURED_YEAR = 1900


def max_manufactured_year() -> int:
    """Next year's models are accepted."""
    return _dt.date.today().year + 1


# Fallbacks when the backend omits its `success` text
MSG_CREATED = "Vehicle registered successfully!"
MSG_UPDATED = "Vehicle updated successfully!"
MSG_DELETED = "Vehicle deleted successfully!"

MSG_CONFIRM_DELETE = "Are you sure you want to delete this vehicle registration?"
MSG_NO_MATCHES = "No vehicles found matching your search criteria."
