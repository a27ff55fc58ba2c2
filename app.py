import datetime
import logging

import streamlit as st

from data_store import CargoStore
from models import ALL_STATUSES, CARGO_STATUSES, CITIES, STATUS_VALUES, status_label
from utils import cargo_frame

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Cargo Tracker", layout="wide")
st.title("🚚 Cargo Tracker")

# One store per browser session
if "store" not in st.session_state:
    st.session_state.store = CargoStore()
store = st.session_state.store

DRAFT_KEYS = ["draft_name", "draft_origin", "draft_destination", "draft_date", "draft_time"]

# ---------------------------- EVENT HANDLERS ----------------------------
def on_field_change(field, key):
    store.update_draft(field, st.session_state[key])

def on_departure_change():
    date = st.session_state.get("draft_date")
    time = st.session_state.get("draft_time")
    departure = datetime.datetime.combine(date, time) if date and time else None
    store.update_draft("departure_date", departure)

def on_add_cargo():
    if store.submit_draft():
        # Dropping the widget keys brings the inputs back empty, matching the cleared draft
        for key in DRAFT_KEYS:
            st.session_state.pop(key, None)

def on_status_change(cargo_id, key):
    if not store.set_status(cargo_id, st.session_state[key]):
        st.session_state.pop(key, None)

def on_filter_change():
    store.set_filter(st.session_state.status_filter)

# ---------------------------- ADD CARGO FORM ----------------------------
with st.container(border=True):
    st.header("Add new cargo")

    col1, col2 = st.columns(2)
    with col1:
        st.text_input(
            "Cargo name", key="draft_name", placeholder="Enter cargo name",
            on_change=on_field_change, args=("name", "draft_name"),
        )
        st.selectbox(
            "Origin", CITIES, index=None, placeholder="Choose a city", key="draft_origin",
            on_change=on_field_change, args=("origin", "draft_origin"),
        )
    with col2:
        st.selectbox(
            "Destination", CITIES, index=None, placeholder="Choose a city", key="draft_destination",
            on_change=on_field_change, args=("destination", "draft_destination"),
        )
        date_col, time_col = st.columns(2)
        date_col.date_input("Departure date", value=None, key="draft_date", on_change=on_departure_change)
        time_col.time_input("Departure time", value=None, key="draft_time", on_change=on_departure_change)

    if store.form_error:
        st.error(store.form_error)

    st.button("Add cargo", key="add_cargo", on_click=on_add_cargo)

# ---------------------------- CARGO LIST ----------------------------
with st.container(border=True):
    head_col, filter_col = st.columns([3, 1])
    head_col.header("Cargo list")
    filter_col.selectbox(
        "Status filter",
        [ALL_STATUSES] + STATUS_VALUES,
        format_func=lambda value: "All statuses" if value == ALL_STATUSES else status_label(value),
        key="status_filter",
        on_change=on_filter_change,
    )

    page = store.view()

    if not page.items:
        st.info("No cargo to show.")
    else:
        st.dataframe(cargo_frame(page.items), hide_index=True, width="stretch")

        st.subheader("Update status")
        for cargo in page.items:
            key = f"status_{cargo.id}"
            id_col, route_col, status_col = st.columns([1, 2, 1])
            id_col.write(f"**{cargo.id}** {cargo.name}")
            route_col.write(f"{cargo.origin} ➜ {cargo.destination}")
            status_col.selectbox(
                f"Status of {cargo.id}",
                STATUS_VALUES,
                index=STATUS_VALUES.index(cargo.status),
                format_func=status_label,
                key=key,
                on_change=on_status_change,
                args=(cargo.id, key),
                label_visibility="collapsed",
            )

    if page.total_pages > 1:
        page_cols = st.columns(page.total_pages)
        for number, col in enumerate(page_cols, start=1):
            col.button(
                str(number),
                key=f"page_{number}",
                type="primary" if number == store.current_page else "secondary",
                on_click=store.set_page,
                args=(number,),
            )

for message in store.pop_notifications():
    st.toast(message, icon="⚠️")

with st.sidebar:
    st.header("📋 Status summary")
    for status in CARGO_STATUSES:
        count = sum(1 for cargo in store.cargo_list if cargo.status == status["value"])
        st.markdown(f"- :{status['color']}[{status['label']}]: {count}")
