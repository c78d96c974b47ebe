import streamlit as st

from dashboard.auth import sign_out


def _toggle_theme(theme):
    theme.toggle()


def render_global_header(ctx):
    cols = st.columns([6, 1, 1], vertical_alignment="center")
    with cols[0]:
        st.markdown("<div class='page-title'>Bento Planner</div>", unsafe_allow_html=True)
        st.caption(f"Signed in as {ctx.session.display_name} ({ctx.session.email})")
    with cols[1]:
        st.button(
            ctx.theme.toggle_icon,
            key="header.theme_toggle",
            help="Switch to light mode" if ctx.theme.dark else "Switch to dark mode",
            on_click=_toggle_theme,
            args=(ctx.theme,),
            use_container_width=True,
        )
    with cols[2]:
        if st.button("Logout", key="header.logout", type="primary", use_container_width=True):
            sign_out()
            st.rerun()
