from datetime import date

import streamlit as st

from dashboard.datekeys import format_long
from dashboard.state.calendar import WEEKDAY_LABELS, month_grid


def _go_today(selection):
    selection.select(date.today())


def render_calendar_tab(ctx):
    selection = ctx.selection
    st.markdown("<div class='section-title secondary'>Calendar</div>", unsafe_allow_html=True)

    nav = st.columns([1, 4, 1], vertical_alignment="center")
    with nav[0]:
        st.button("‹", key="calendar.prev", on_click=selection.shift_month, args=(-1,), use_container_width=True)
    with nav[1]:
        st.markdown(f"<div style='text-align:center'><b>{selection.month_title()}</b></div>", unsafe_allow_html=True)
    with nav[2]:
        st.button("›", key="calendar.next", on_click=selection.shift_month, args=(1,), use_container_width=True)

    header = st.columns(7)
    for col, label in zip(header, WEEKDAY_LABELS):
        col.markdown(f"<div class='small-label' style='text-align:center'>{label}</div>", unsafe_allow_html=True)

    weeks = month_grid(selection.month.year, selection.month.month, ctx.journal.entries, ctx.tasks.todos)
    for week in weeks:
        cols = st.columns(7)
        for col, cell in zip(cols, week):
            label = f"{cell.day.day}{cell.marks.badge}"
            if not cell.in_month:
                label = f"·{label}"
            col.button(
                label,
                key=f"calendar.day.{cell.key}",
                type="primary" if cell.key == selection.key else "secondary",
                on_click=selection.select,
                args=(cell.key,),
                use_container_width=True,
            )

    st.caption("• has tasks   ✎ has a journal entry")
    bottom = st.columns([3, 1], vertical_alignment="center")
    with bottom[0]:
        st.markdown(f"Selected: **{format_long(selection.key)}**")
    with bottom[1]:
        st.button("Today", key="calendar.today", on_click=_go_today, args=(selection,), use_container_width=True)
