import pandas as pd
import streamlit as st
from typing import List, Dict, Any

from domain.constants import FIELD_LABELS
from utils.dates import display_date


def to_dataframe(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Tabular form of the cached records, one labelled column per field."""
    rows = []
    for r in records:
        row = {label: r.get(key) for key, label in FIELD_LABELS.items()}
        row[FIELD_LABELS['registrationDate']] = display_date(r.get('registrationDate'))
        rows.append(row)
    return pd.DataFrame(rows, columns=list(FIELD_LABELS.values()))


def render(records: List[Dict[str, Any]]):
    st.dataframe(to_dataframe(records), hide_index=True, use_container_width=True)


def record_label(record: Dict[str, Any]) -> str:
    """Selectbox label; the id keeps otherwise identical rows apart."""
    return f"{record.get('plateNo', '?')} | {record.get('manufacturer', '')} {record.get('model') or ''} | {record.get('owner', '')} ({record.get('_id', '')})"
