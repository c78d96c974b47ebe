import html

import streamlit as st

INPUT_KEY = "tasks.input"


def _begin_edit(tasks, todo_id):
    text = tasks.begin_edit(todo_id)
    if text is not None:
        st.session_state[INPUT_KEY] = text


def _cancel_edit(tasks):
    tasks.cancel_edit()
    st.session_state[INPUT_KEY] = ""


def _submit(tasks):
    tasks.add_or_update_todo(st.session_state.get(INPUT_KEY, ""))
    if tasks.editing_id is None:
        st.session_state[INPUT_KEY] = ""


def render_tasks_tab(ctx):
    tasks = ctx.tasks
    st.markdown("<div class='section-title'>Tasks</div>", unsafe_allow_html=True)
    for notice in tasks.drain_notices():
        st.warning(notice)

    editing = tasks.editing_id is not None
    with st.form("tasks.form", border=False):
        row = st.columns([5, 1], vertical_alignment="bottom")
        with row[0]:
            st.text_input(
                "Task",
                key=INPUT_KEY,
                placeholder="Add a new task...",
                label_visibility="collapsed",
            )
        with row[1]:
            st.form_submit_button(
                "✎" if editing else "＋",
                help="Save task" if editing else "Add task",
                on_click=_submit,
                args=(tasks,),
                use_container_width=True,
            )
    if editing:
        st.button("Cancel edit", key="tasks.cancel_edit", on_click=_cancel_edit, args=(tasks,))

    visible = tasks.visible_for(ctx.selection.key)
    if not visible:
        st.caption("No tasks for this day")
        return

    for todo in visible:
        cols = st.columns([0.8, 5, 0.8, 0.8], vertical_alignment="center")
        with cols[0]:
            st.button(
                "✓" if todo.completed else "○",
                key=f"tasks.toggle.{todo.id}",
                help="Mark as not done" if todo.completed else "Mark as done",
                on_click=tasks.toggle_completion,
                args=(todo.id,),
            )
        with cols[1]:
            css_class = "todo-done" if todo.completed else "todo-open"
            st.markdown(f"<span class='{css_class}'>{html.escape(todo.text)}</span>", unsafe_allow_html=True)
        with cols[2]:
            st.button("✏️", key=f"tasks.edit.{todo.id}", help="Edit", on_click=_begin_edit, args=(tasks, todo.id))
        with cols[3]:
            st.button("🗑️", key=f"tasks.delete.{todo.id}", help="Delete", on_click=tasks.delete_todo, args=(todo.id,))
