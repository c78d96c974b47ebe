import logging

import streamlit as st

from dashboard.auth import bootstrap_local_secrets_from_env, load_local_env
from dashboard.context import open_dashboard
from dashboard.header import render_global_header
from dashboard.logging_config import configure_logging
from dashboard.router import render_router, render_unauthenticated
from dashboard.theme import get_theme_state, inject_theme_css, render_background

st.set_page_config(page_title="Bento Planner", page_icon="🍱", layout="wide")

load_local_env()
bootstrap_local_secrets_from_env()
configure_logging()
logger = logging.getLogger("dashboard")

theme = get_theme_state()
inject_theme_css(theme)
render_background()

identity, context = open_dashboard(theme)
if context is None:
    render_unauthenticated(identity)
    st.stop()

logger.debug("Rendering dashboard for %s", identity.owner_id)
render_global_header(context)
render_router(context)
