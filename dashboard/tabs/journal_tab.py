import streamlit as st

from dashboard.datekeys import format_weekday_long


def _widget_key(day_key):
    return f"journal.input.{day_key}"


def _store_draft(journal, day_key):
    journal.set_draft(day_key, st.session_state.get(_widget_key(day_key), ""))


def _save(journal, day_key):
    widget_key = _widget_key(day_key)
    result = journal.save(st.session_state.get(widget_key, ""), day_key)
    if result is not None and result.ok:
        st.session_state[widget_key] = journal.displayed_content(day_key)
        st.toast("Journal entry saved")


def render_journal_tab(ctx):
    journal = ctx.journal
    day_key = ctx.selection.key
    st.markdown("<div class='section-title'>Journal</div>", unsafe_allow_html=True)
    st.markdown(f"<div class='small-label'>{format_weekday_long(day_key)}</div>", unsafe_allow_html=True)
    for notice in journal.drain_notices():
        st.warning(notice)

    widget_key = _widget_key(day_key)
    if widget_key not in st.session_state:
        st.session_state[widget_key] = journal.displayed_content(day_key)
    st.text_area(
        "Entry",
        key=widget_key,
        height=200,
        placeholder="Write your thoughts for today...",
        label_visibility="collapsed",
        on_change=_store_draft,
        args=(journal, day_key),
    )
    if journal.has_unsaved(day_key):
        st.caption("Unsaved changes")
    st.button(
        "Save Entry",
        key="journal.save",
        type="primary",
        on_click=_save,
        args=(journal, day_key),
        use_container_width=True,
    )
