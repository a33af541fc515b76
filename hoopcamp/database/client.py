"""Supabase client configuration."""

import os

import streamlit as st
from dotenv import load_dotenv
from streamlit import runtime
from streamlit.errors import StreamlitAPIException
from supabase import Client, create_client

from hoopcamp.errors import ConfigurationError

SESSION_CLIENT_KEY = "supabase_client"


def _read_streamlit_secrets() -> tuple[str | None, str | None]:
    """Read Supabase credentials from .streamlit/secrets.toml, if present."""
    try:
        url = st.secrets.connections.supabase.SUPABASE_URL
        key = st.secrets.connections.supabase.SUPABASE_KEY
    except (AttributeError, KeyError, FileNotFoundError, StreamlitAPIException):
        return None, None
    return url, key


def get_supabase_credentials() -> tuple[str, str]:
    """Get Supabase credentials from either .env or Streamlit secrets."""
    # First try environment variables
    load_dotenv()
    url = os.environ.get("SUPABASE_URL")
    key = os.environ.get("SUPABASE_KEY")

    # If not found, try Streamlit secrets
    if not url or not key:
        url, key = _read_streamlit_secrets()

    if not url or not key:
        raise ConfigurationError(
            "Supabase credentials not found. Please set either:\n"
            "1. SUPABASE_URL and SUPABASE_KEY in .env file, or\n"
            "2. connections.supabase credentials in .streamlit/secrets.toml"
        )
    return url, key


_client: Client | None = None


def get_supabase_client() -> Client:
    """Get or create the Supabase client.

    Inside a running Streamlit app every browser session gets its own client,
    so that one user's auth session never leaks into another's. Outside of
    Streamlit (scripts, tests) a module-level singleton is used.
    """
    global _client
    if runtime.exists():
        if SESSION_CLIENT_KEY not in st.session_state:
            url, key = get_supabase_credentials()
            st.session_state[SESSION_CLIENT_KEY] = create_client(url, key)
        return st.session_state[SESSION_CLIENT_KEY]

    if _client is None:
        url, key = get_supabase_credentials()
        _client = create_client(url, key)
    return _client
