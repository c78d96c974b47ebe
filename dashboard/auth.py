import logging
import os
from dataclasses import dataclass

import streamlit as st

from dashboard.state import session_slices

logger = logging.getLogger(__name__)

ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")
LOCAL_SECRETS_PATH = os.path.join(os.path.dirname(__file__), "..", ".streamlit", "secrets.toml")
DEFAULT_METADATA_URL = "https://accounts.google.com/.well-known/openid-configuration"

ENV_FALLBACK_KEYS = {
    ("app", "allowed_emails"): "ALLOWED_EMAILS",
    ("app", "dev_user"): "PLANNER_DEV_USER",
    ("app", "auth_provider"): "AUTH_PROVIDER",
}

SLICE = "auth"


@dataclass(frozen=True)
class SessionContext:
    owner_id: str
    email: str
    display_name: str


def load_local_env():
    if not os.path.exists(ENV_PATH):
        return
    with open(ENV_PATH, "r", encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def bootstrap_local_secrets_from_env():
    """Write ``.streamlit/secrets.toml`` from the OIDC env vars when it is missing."""
    if os.path.exists(LOCAL_SECRETS_PATH):
        return False
    required = ["AUTH_REDIRECT_URI", "AUTH_COOKIE_SECRET", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET"]
    if not all(os.getenv(key) for key in required):
        return False
    os.makedirs(os.path.dirname(LOCAL_SECRETS_PATH), exist_ok=True)
    metadata_url = os.getenv("GOOGLE_SERVER_METADATA_URL") or DEFAULT_METADATA_URL
    allowed = (os.getenv("ALLOWED_EMAILS") or "").strip()
    with open(LOCAL_SECRETS_PATH, "w", encoding="utf-8") as secrets_file:
        secrets_file.write("[auth]\n")
        secrets_file.write(f"redirect_uri = \"{os.getenv('AUTH_REDIRECT_URI')}\"\n")
        secrets_file.write(f"cookie_secret = \"{os.getenv('AUTH_COOKIE_SECRET')}\"\n\n")
        secrets_file.write("[auth.google]\n")
        secrets_file.write(f"client_id = \"{os.getenv('GOOGLE_CLIENT_ID')}\"\n")
        secrets_file.write(f"client_secret = \"{os.getenv('GOOGLE_CLIENT_SECRET')}\"\n")
        secrets_file.write(f"server_metadata_url = \"{metadata_url}\"\n")
        if allowed:
            secrets_file.write("\n[app]\n")
            secrets_file.write(f"allowed_emails = \"{allowed}\"\n")
    logger.info("Wrote %s from environment", LOCAL_SECRETS_PATH)
    return True


def _from_secrets(path, default=None):
    try:
        current = st.secrets
        for key in path:
            if key not in current:
                return default
            current = current[key]
    except FileNotFoundError:
        return default
    return current


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    return _from_secrets(path, default)


def auth_configured():
    # st.login reads the [auth] section of st.secrets only.
    return bool(
        _from_secrets(("auth", "redirect_uri"))
        and _from_secrets(("auth", "cookie_secret"))
        and _from_secrets(("auth", "google", "client_id"))
        and _from_secrets(("auth", "google", "client_secret"))
    )


def dev_user_email():
    return str(get_secret(("app", "dev_user")) or "").strip().lower()


def allowed_emails():
    raw = get_secret(("app", "allowed_emails")) or ""
    return {email.strip().lower() for email in str(raw).split(",") if email.strip()}


def display_name_for(email, fallback_name=""):
    name = str(fallback_name or "").strip()
    if name:
        return name.split()[0]
    local = (email or "").split("@")[0].replace(".", " ").strip()
    return local.title() if local else "User"


def _identity_from_email(email, name=""):
    clean = str(email or "").strip().lower()
    if not clean:
        return None
    return SessionContext(owner_id=clean, email=clean, display_name=display_name_for(clean, name))


def current_identity():
    """The signed-in identity, or ``None`` when nobody is signed in."""
    if auth_configured():
        if not st.user.is_logged_in:
            return None
        return _identity_from_email(getattr(st.user, "email", ""), getattr(st.user, "name", ""))
    dev_email = dev_user_email()
    if dev_email and not session_slices.get_value(SLICE, "dev_signed_out", False):
        return _identity_from_email(dev_email)
    return None


def is_allowed(identity):
    allowed = allowed_emails()
    return not allowed or identity.owner_id in allowed


def sign_in():
    if auth_configured():
        provider = get_secret(("app", "auth_provider")) or "google"
        st.login(provider)
        return
    session_slices.set_value(SLICE, "dev_signed_out", False)


def sign_out():
    identity = current_identity()
    session_slices.clear_slice("planner")
    if identity is not None:
        logger.info("Signing out %s", identity.owner_id)
    if auth_configured():
        st.logout()
        return
    session_slices.set_value(SLICE, "dev_signed_out", True)
