#!/usr/bin/env python3
"""AQI Live Dashboard."""

from __future__ import annotations

import logging

import streamlit as st

from airdash.data.waqi import HERE_QUERY, StationReport, WaqiClient, geo_query
from airdash.services.charts import build_gauge, build_trend_chart
from airdash.services.dashboard import DashboardState, forecast_table, pollutant_table, refresh
from airdash.services.favorites import FavoritesStore
from airdash.utils.config import get_data_root, load_waqi_token
from airdash.utils.dates import format_day_label
from airdash.utils.logging import configure_logging
from airdash.utils.storage import FileStorage

configure_logging()
LOGGER = logging.getLogger(__name__)


@st.cache_resource
def get_client() -> WaqiClient:
    return WaqiClient(load_waqi_token())


@st.cache_data(ttl=600, show_spinner=False)
def load_station(query: str) -> StationReport:
    return get_client().station(query)


class CachedStationSource:
    def station(self, query: str) -> StationReport:
        return load_station(query)


def get_state() -> DashboardState:
    if "dashboard" not in st.session_state:
        st.session_state["dashboard"] = DashboardState()
    return st.session_state["dashboard"]


def get_favorites() -> FavoritesStore:
    if "favorites" not in st.session_state:
        st.session_state["favorites"] = FavoritesStore(FileStorage(get_data_root() / "favorites"))
    return st.session_state["favorites"]


def search(query: str) -> None:
    with st.spinner("Fetching data..."):
        refresh(get_state(), CachedStationSource(), query)


def auto_locate() -> None:
    """Look up the visitor's station once per session; failures stay quiet."""
    if st.session_state.get("auto_located"):
        return
    st.session_state["auto_located"] = True
    with st.spinner("Detecting your location..."):
        refresh(get_state(), CachedStationSource(), HERE_QUERY, silent=True)


def render_sidebar(state: DashboardState, favorites: FavoritesStore) -> None:
    st.sidebar.header("Search")
    city = st.sidebar.text_input("City or 'geo:lat;lon'", value=state.query)
    if st.sidebar.button("Search", use_container_width=True):
        search(city)

    if st.sidebar.button("Use my location", use_container_width=True):
        search(HERE_QUERY)

    with st.sidebar.expander("Search by coordinates"):
        latitude = st.number_input("Latitude", value=0.0, min_value=-90.0, max_value=90.0, format="%.4f")
        longitude = st.number_input("Longitude", value=0.0, min_value=-180.0, max_value=180.0, format="%.4f")
        if st.button("Find nearest station"):
            search(geo_query(latitude, longitude))

    st.sidebar.markdown("---")
    st.sidebar.subheader("Saved Cities")
    if not len(favorites):
        st.sidebar.caption("No saved cities yet - add one!")
    for name in favorites:
        load_col, remove_col = st.sidebar.columns([4, 1])
        if load_col.button(name, key=f"load-{name}", use_container_width=True):
            search(name)
        remove_col.button("✕", key=f"remove-{name}", on_click=favorites.remove, args=(name,))


def render_location(state: DashboardState) -> None:
    st.subheader("Location")
    st.write(state.location_name or "—")
    if state.report and state.report.observed_at:
        st.caption(f"Updated {state.report.observed_at:%Y-%m-%d %H:%M}")
    st.plotly_chart(build_gauge(state.index), use_container_width=True)

    advice = state.advice
    if advice.has_reading:
        st.markdown(
            f"<div style='background:{state.color};padding:0.6rem;border-radius:0.8rem;color:#111'>"
            f"<b style='font-size:1.8rem'>{state.index:g}</b> {advice.level}</div>",
            unsafe_allow_html=True,
        )
        st.write(advice.action)
        if advice.mask:
            st.warning("Mask recommended outdoors.")
    else:
        st.info("Search a city or use your location to see recommendations.")


def render_trend(state: DashboardState) -> None:
    report = state.report
    if report and report.hourly:
        st.plotly_chart(build_trend_chart(report.hourly), use_container_width=True)
        st.caption("Values shown are best-effort / available.")

    st.subheader("🚬 Cigarette Equivalent")
    st.metric("Breathing this air for a day =", f"{state.cigarettes} cigarettes")

    st.subheader("3-Day Forecast")
    if report and report.forecast:
        cols = st.columns(len(report.forecast))
        for col, day in zip(cols, report.forecast):
            col.metric(format_day_label(day.day), f"{day.pm25:g} µg/m³" if day.pm25 is not None else "—")
            col.caption(f"PM10: {day.pm10 if day.pm10 is not None else '—'}")
            col.caption(f"O₃: {day.o3 if day.o3 is not None else '—'}")
        with st.expander("Forecast table"):
            st.dataframe(forecast_table(report.forecast), hide_index=True)
    else:
        st.info("Forecast not available for this station.")


def render_details(state: DashboardState, favorites: FavoritesStore) -> None:
    st.subheader("Pollutant Details")
    st.caption("µg/m³ unless otherwise noted")
    report = state.report
    if report is not None:
        st.dataframe(pollutant_table(report.pollutants), hide_index=True, use_container_width=True)
    else:
        st.caption("No station loaded.")

    st.subheader("Quick Actions")
    name = state.location_name
    label = "Unfavorite" if name and favorites.contains(name) else "Add Favorite"
    fav_col, reset_col = st.columns(2)
    fav_col.button(label, disabled=not name, on_click=favorites.toggle, args=(name,), use_container_width=True)
    reset_col.button("Reset", on_click=state.reset, use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="AQI Live Dashboard", layout="wide")
    st.title("AQI Live Dashboard")
    st.caption("Real-time air quality, pollutants, forecasts & advice")

    auto_locate()
    state = get_state()
    favorites = get_favorites()
    render_sidebar(state, favorites)

    left, middle, right = st.columns([1, 2, 1])
    with left:
        render_location(state)
    with middle:
        render_trend(state)
    with right:
        render_details(state, favorites)

    if state.error:
        st.error(state.error)

    st.sidebar.markdown("---")
    st.sidebar.caption(
        "Data comes from the WAQI platform. Forecast/historical availability varies by station."
    )


if __name__ == "__main__":
    main()
