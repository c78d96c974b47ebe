from dataclasses import dataclass

import streamlit as st

from dashboard.state import session_slices

THEME_PRESETS = {
    "dark": {
        "bg_main": "#0f1220",
        "bg_from": "#1e1b4b",
        "bg_to": "#3b0a3f",
        "bg_card": "rgba(23, 25, 43, 0.62)",
        "border": "rgba(148, 163, 184, 0.22)",
        "text_main": "#eef0fb",
        "text_soft": "#a5a9c4",
        "primary": "#818cf8",
        "secondary": "#f472b6",
        "blob_a": "#4338ca",
        "blob_b": "#be185d",
        "blob_c": "#3730a3",
        "selected_bg": "rgba(129, 140, 248, 0.35)",
        "shadow": "0 12px 30px rgba(0, 0, 0, 0.45)",
    },
    "light": {
        "bg_main": "#f7f7fb",
        "bg_from": "#e0e7ff",
        "bg_to": "#fce7f3",
        "bg_card": "rgba(255, 255, 255, 0.62)",
        "border": "rgba(148, 163, 184, 0.35)",
        "text_main": "#1f2233",
        "text_soft": "#5b607a",
        "primary": "#6366f1",
        "secondary": "#ec4899",
        "blob_a": "#a5b4fc",
        "blob_b": "#f9a8d4",
        "blob_c": "#c7d2fe",
        "selected_bg": "rgba(99, 102, 241, 0.22)",
        "shadow": "0 10px 24px rgba(31, 34, 51, 0.12)",
    },
}


@dataclass
class ThemeState:
    dark: bool = False

    @classmethod
    def from_preference(cls, scheme):
        return cls(dark=str(scheme or "").lower() == "dark")

    @property
    def name(self):
        return "dark" if self.dark else "light"

    @property
    def toggle_icon(self):
        return "🌙" if self.dark else "☀️"

    def toggle(self):
        self.dark = not self.dark
        return self.dark


def preferred_scheme():
    """Colour scheme reported by the browser, falling back to the app config."""
    theme_info = getattr(st.context, "theme", None)
    scheme = getattr(theme_info, "type", None)
    if scheme in {"dark", "light"}:
        return scheme
    return st.get_option("theme.base") or "light"


def get_theme_state():
    theme = session_slices.get_value("ui", "theme")
    if theme is None:
        theme = ThemeState.from_preference(preferred_scheme())
        session_slices.set_value("ui", "theme", theme)
    return theme


def inject_theme_css(theme):
    active = THEME_PRESETS[theme.name]
    theme_vars_css = "\n".join(
        f"    --{key.replace('_', '-')}: {value};" for key, value in active.items()
    )
    st.markdown(
        "<style>\n:root {\n"
        + theme_vars_css
        + "\n}\n"
        + """
.stApp {
    background: var(--bg-main);
    color: var(--text-main);
}

[data-testid="stHeader"] {
    background: transparent;
}

.bento-bg {
    position: fixed;
    inset: 0;
    z-index: 0;
    overflow: hidden;
    pointer-events: none;
    background: linear-gradient(135deg, var(--bg-from), var(--bg-to));
}

.bento-bg .blob {
    position: absolute;
    border-radius: 9999px;
    opacity: 0.3;
    filter: blur(40px);
    animation: bento-float ease-in-out infinite;
}

.bento-bg .blob-a { width: 16rem; height: 16rem; left: -2rem; top: 100px; background: var(--blob-a); animation-duration: 15s; }
.bento-bg .blob-b { width: 24rem; height: 24rem; left: 200px; top: 300px; background: var(--blob-b); animation-duration: 20s; animation-delay: 2s; }
.bento-bg .blob-c { width: 12rem; height: 12rem; left: 400px; top: 0; background: var(--blob-c); animation-duration: 12s; animation-delay: 1s; }

@keyframes bento-float {
    0%, 100% { transform: translate(0, 0); }
    50% { transform: translate(100px, -100px); }
}

.stMainBlockContainer, [data-testid="stHeader"] {
    position: relative;
    z-index: 1;
}

.page-title {
    font-size: 2.2rem;
    font-weight: 700;
    background: linear-gradient(90deg, var(--primary), var(--secondary));
    -webkit-background-clip: text;
    background-clip: text;
    color: transparent;
}

.section-title {
    font-size: 1.5rem;
    font-weight: 600;
    margin: 0 0 12px 0;
    color: var(--primary);
}

.section-title.secondary { color: var(--secondary); }

[data-testid="stColumn"] > div > [data-testid="stVerticalBlockBorderWrapper"] {
    background: var(--bg-card);
    backdrop-filter: blur(12px);
    border-radius: 18px;
    box-shadow: var(--shadow);
}

.small-label {
    color: var(--text-soft);
    font-size: 13px;
}

.todo-done {
    text-decoration: line-through;
    color: var(--text-soft);
}

.bento-footer {
    margin-top: 48px;
    text-align: center;
    color: var(--text-soft);
    font-size: 13px;
}
</style>
""",
        unsafe_allow_html=True,
    )


def render_background():
    st.markdown(
        "<div class='bento-bg'>"
        "<span class='blob blob-a'></span>"
        "<span class='blob blob-b'></span>"
        "<span class='blob blob-c'></span>"
        "</div>",
        unsafe_allow_html=True,
    )
