import streamlit as st

from dashboard.auth import auth_configured, dev_user_email, sign_in, sign_out


def render_login_view():
    st.markdown("<div class='page-title'>Bento Planner</div>", unsafe_allow_html=True)
    st.markdown("<div class='section-title'>Login Required</div>", unsafe_allow_html=True)

    if auth_configured():
        st.markdown("Sign in to see your tasks, calendar and journal. New accounts are created on first login.")
        if st.button("Login with Google", key="login.google", type="primary"):
            sign_in()
        return

    dev_email = dev_user_email()
    if dev_email:
        st.markdown("Login is running in local development mode.")
        if st.button(f"Continue as {dev_email}", key="login.dev", type="primary"):
            sign_in()
            st.rerun()
        return

    st.markdown("Configure an OIDC provider in Streamlit secrets before using the app.")
    st.code(
        "[auth]\n"
        "redirect_uri = \"http://localhost:8501/oauth2callback\"\n"
        "cookie_secret = \"LONG_RANDOM_SECRET\"\n\n"
        "[auth.google]\n"
        "client_id = \"YOUR_CLIENT_ID\"\n"
        "client_secret = \"YOUR_CLIENT_SECRET\"\n"
        "server_metadata_url = \"https://accounts.google.com/.well-known/openid-configuration\"",
        language="toml",
    )
    st.caption("For local development set PLANNER_DEV_USER=you@example.com instead.")


def render_access_denied(identity):
    st.error(f"Access denied for {identity.email}.")
    if st.button("Logout", key="login.logout_denied"):
        sign_out()
        st.rerun()
