"""
About page: contact details, mission and tips
"""
import streamlit as st

CONTACT = {
    "Email": "support@cleancity.com",
    "Phone": "(555) 123-CLEAN",
    "Emergency": "(555) 911-WASTE",
    "Hours": "Mon-Fri 8AM-6PM",
}

TIPS = [
    ("♻️", "Recycle Right", "Clean containers before recycling and separate materials properly"),
    ("🗑️", "Reduce Waste", "Use reusable bags, containers, and avoid single-use items"),
    ("🌿", "Compost Organic", "Turn food scraps and yard waste into nutrient-rich compost"),
]


def render(state):
    st.markdown("## About CleanCity")
    st.markdown(
        "CleanCity is a community-driven initiative to help residents actively participate "
        "in keeping their neighborhoods clean and environmentally sustainable."
    )

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### 📧 Contact Information")
        for label, value in CONTACT.items():
            st.markdown(f"**{label}:** {value}")
        st.link_button("📧 Email Us", f"mailto:{CONTACT['Email']}")
    with col2:
        st.markdown("### 🌱 Our Mission")
        st.markdown(
            "To create cleaner, healthier communities through citizen engagement, "
            "efficient waste management, and environmental awareness. Together, "
            "we can build a sustainable future for our neighborhoods."
        )

    st.markdown("### 💡 Tips for Residents")
    columns = st.columns(len(TIPS))
    for column, (icon, title, text) in zip(columns, TIPS):
        with column:
            st.markdown(f"<div style='text-align: center; font-size: 2rem;'>{icon}</div>", unsafe_allow_html=True)
            st.markdown(f"**{title}**")
            st.caption(text)
