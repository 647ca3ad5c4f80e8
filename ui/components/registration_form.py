import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import MIN_MANUFACTURED_YEAR, max_manufactured_year
from domain.models import VehicleRegistration, registration_from_form


def render(form_data: Dict[str, Any], key_prefix: str, is_edit: bool = False) -> Optional[VehicleRegistration]:
    """
    Renders the vehicle form for both registration and editing.

    Args:
        form_data (Dict[str, Any]): Initial values keyed by wire names (see domain.models.form_defaults).
        key_prefix (str): A unique prefix for Streamlit widget keys.
        is_edit (bool): Switches labels to the edit context.

    Returns:
        VehicleRegistration: The validated submission, or None if not submitted or invalid.
    """
    year_value = form_data.get('manufacturedYear')
    # number_input rejects an initial value outside its bounds
    if year_value is not None and not MIN_MANUFACTURED_YEAR <= year_value <= max_manufactured_year():
        year_value = None

    with st.form(f"form_{key_prefix}"):
        c1, c2 = st.columns(2)
        owner_id = c1.text_input("Owner ID *", value=form_data.get('ownerId', ''),
                                 placeholder="e.g., OID123", key=f"{key_prefix}_ownerId")
        plate_no = c2.text_input("License Plate (plateNo) *", value=form_data.get('plateNo', ''),
                                 placeholder="e.g., ABC-1234", key=f"{key_prefix}_plateNo")
        manufacturer = c1.text_input("Manufacturer *", value=form_data.get('manufacturer', ''),
                                     placeholder="e.g., Toyota", key=f"{key_prefix}_manufacturer")
        model = c2.text_input("Model", value=form_data.get('model', ''),
                              placeholder="e.g., Camry", key=f"{key_prefix}_model")
        manufactured_year = c1.number_input(
            "Manufactured Year *",
            min_value=MIN_MANUFACTURED_YEAR,
            max_value=max_manufactured_year(),
            value=year_value,
            step=1,
            placeholder="e.g., 2023",
            key=f"{key_prefix}_manufacturedYear",
        )
        vehicle = c2.text_input("Vehicle Type / Description *", value=form_data.get('vehicle', ''),
                                placeholder="e.g., Sedan, SUV, Truck", key=f"{key_prefix}_vehicle")
        color = c1.text_input("Color", value=form_data.get('color', ''),
                              placeholder="e.g., Red, Blue, Black", key=f"{key_prefix}_color")
        owner = c2.text_input("Owner *", value=form_data.get('owner', ''),
                              placeholder="e.g., John Doe", key=f"{key_prefix}_owner")
        registration_date = c1.date_input("Registration Date", value=form_data.get('registrationDate'),
                                          key=f"{key_prefix}_registrationDate")

        submit_label = "Update Vehicle" if is_edit else "Register Vehicle"
        submitted = st.form_submit_button(submit_label, type="primary")

        if submitted:
            values = {
                'ownerId': owner_id,
                'plateNo': plate_no,
                'manufacturer': manufacturer,
                'model': model,
                'manufacturedYear': manufactured_year,
                'vehicle': vehicle,
                'color': color,
                'owner': owner,
                'registrationDate': registration_date,
            }
            try:
                return registration_from_form(values)
            except ValueError as e:
                st.error(e)
                return None

    return None
