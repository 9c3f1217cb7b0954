"""
Collection schedule by zone
"""
import streamlit as st

SCHEDULE = [
    {
        "zone": "Zone A - Central",
        "areas": ["Downtown", "Main Street", "City Center"],
        "garbage": "Monday & Thursday",
        "recycling": "Tuesday",
        "hazardous": "First Saturday of month",
    },
    {
        "zone": "Zone B - North",
        "areas": ["Northside", "Parkview", "Hillcrest"],
        "garbage": "Tuesday & Friday",
        "recycling": "Wednesday",
        "hazardous": "Second Saturday of month",
    },
    {
        "zone": "Zone C - South",
        "areas": ["Southdale", "Riverside", "Oak Valley"],
        "garbage": "Wednesday & Saturday",
        "recycling": "Thursday",
        "hazardous": "Third Saturday of month",
    },
    {
        "zone": "Zone D - East",
        "areas": ["Eastbrook", "Garden District", "Sunrise"],
        "garbage": "Monday & Friday",
        "recycling": "Tuesday",
        "hazardous": "Fourth Saturday of month",
    },
    {
        "zone": "Zone E - West",
        "areas": ["Westfield", "Meadowbrook", "Sunset Hills"],
        "garbage": "Tuesday & Saturday",
        "recycling": "Wednesday",
        "hazardous": "First Saturday of month",
    },
]

DOS = [
    "Separate recyclables from regular waste",
    "Put bins out by 7:00 AM on collection day",
    "Keep lids closed to prevent spills",
    "Rinse containers before recycling",
]

DONTS = [
    "Don't overfill bins",
    "Don't put hazardous waste in regular bins",
    "Don't leave bins out overnight",
    "Don't put electronics in regular waste",
]


def schedule_card_html(entry) -> str:
    return f"""
        <div class="schedule-card">
            <strong>{entry['zone']}</strong>
            <div style="color: #6b7280; margin: 0.25rem 0 0.5rem;">Areas: {', '.join(entry['areas'])}</div>
            <span class="time-badge">🗑️ Garbage: {entry['garbage']}</span>
            <span class="time-badge">♻️ Recycling: {entry['recycling']}</span>
            <span class="time-badge">⚠️ Hazardous: {entry['hazardous']}</span>
        </div>
    """


def render(state):
    st.markdown("## Waste Collection Schedule")
    st.caption("Check your area's waste collection schedule below. Please put bins out by 7:00 AM on collection days.")

    columns = st.columns(2)
    for index, entry in enumerate(SCHEDULE):
        with columns[index % 2]:
            st.markdown(schedule_card_html(entry), unsafe_allow_html=True)

    st.markdown("### Collection Guidelines")
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("#### ✅ Do's")
        st.markdown("\n".join(f"- {item}" for item in DOS))
    with col2:
        st.markdown("#### ❌ Don'ts")
        st.markdown("\n".join(f"- {item}" for item in DONTS))
