from datetime import date

import streamlit as st

from dashboard.tabs.calendar_tab import render_calendar_tab
from dashboard.tabs.journal_tab import render_journal_tab
from dashboard.tabs.login_tab import render_access_denied, render_login_view
from dashboard.tabs.tasks_tab import render_tasks_tab


def render_unauthenticated(identity=None):
    if identity is None:
        render_login_view()
    else:
        render_access_denied(identity)


def render_router(ctx):
    if not ctx.persistent:
        st.info("Backend API not configured: entries are kept in memory and will not persist across restarts.")

    columns = st.columns(3, gap="medium")
    with columns[0]:
        with st.container(border=True):
            render_tasks_tab(ctx)
    with columns[1]:
        with st.container(border=True):
            render_calendar_tab(ctx)
    with columns[2]:
        with st.container(border=True):
            render_journal_tab(ctx)

    st.markdown(
        f"<div class='bento-footer'>Bento Planner © {date.today().year}</div>",
        unsafe_allow_html=True,
    )
