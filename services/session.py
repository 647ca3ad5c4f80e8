from typing import Any, MutableMapping

import streamlit as st

from config import AppConfig
from services.api import RegistrationClient
from services.controller import RegistrationController

_CLIENT_KEY = 'api_client'


@st.cache_resource
def get_config() -> AppConfig:
    return AppConfig.from_env()


def client_for_session(state: MutableMapping[str, Any], config: AppConfig) -> RegistrationClient:
    """One HTTP client per browser session; requests.Session is not shared across threads."""
    if _CLIENT_KEY not in state:
        state[_CLIENT_KEY] = RegistrationClient.from_config(config)
    return state[_CLIENT_KEY]


def get_controller() -> RegistrationController:
    return RegistrationController(st.session_state, client_for_session(st.session_state, get_config()))
