import streamlit as st

PREFIX = "slice"


def _key(slice_name):
    return f"{PREFIX}.{slice_name}"


def get_slice(slice_name):
    return st.session_state.setdefault(_key(slice_name), {})


def get_value(slice_name, name, default=None):
    return get_slice(slice_name).get(name, default)


def set_value(slice_name, name, value):
    get_slice(slice_name)[name] = value


def clear_slice(slice_name):
    st.session_state.pop(_key(slice_name), None)
