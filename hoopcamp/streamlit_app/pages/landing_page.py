"""Landing page of the Streamlit application."""

import streamlit as st

from hoopcamp.auth.session import get_current_profile
from hoopcamp.streamlit_app.navigation import dashboard_path
from hoopcamp.streamlit_app.utils import go


def main():
    """Public landing page."""

    # Hero section
    st.title("🏀 Hoopcamp")
    st.write("Run your basketball camps: rosters, box scores, evaluations and attendance in one place.")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown("### 🏕️ Camps")
        st.caption("Create camps and let students enroll themselves.")
    with col2:
        st.markdown("### 📊 Stats")
        st.caption("Record box scores per game and track season averages.")
    with col3:
        st.markdown("### ✅ Attendance")
        st.caption("Check players in by scanning their personal QR code.")

    st.markdown("---")
    profile = get_current_profile()
    path = dashboard_path(profile.role) if profile else None
    if path is not None:
        if st.button("Go to Dashboard", type="primary"):
            go(path)
    elif st.button("Get Started", type="primary"):
        go("/auth")


if __name__ == "__main__":
    main()
