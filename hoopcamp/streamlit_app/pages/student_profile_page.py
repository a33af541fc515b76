"""Student profile page - contact details and the check-in QR code."""

import streamlit as st

from hoopcamp.reports.qr_codes import make_student_qr_png, qr_filename
from hoopcamp.streamlit_app.logic import profile_logic
from hoopcamp.streamlit_app.utils import require_profile


def main():
    profile = require_profile("student")

    st.title("My Profile")

    details_col, qr_col = st.columns([2, 1])

    with details_col:
        first, last = profile_logic.split_name(profile.name)
        with st.form("profile_form"):
            name_col1, name_col2 = st.columns(2)
            first_name = name_col1.text_input("First Name", value=first)
            last_name = name_col2.text_input("Last Name", value=last)
            st.text_input("Email", value=profile.email or "", disabled=True)
            address = st.text_input("Address", value=profile.address or "")
            phone_col1, phone_col2 = st.columns(2)
            mobile_no = phone_col1.text_input("Mobile No.", value=profile.mobile_no or "")
            emergency_contact_no = phone_col2.text_input(
                "Emergency Contact No.", value=profile.emergency_contact_no or ""
            )
            submitted = st.form_submit_button("Save Profile", type="primary")

        if submitted:
            if not first_name.strip():
                st.error("First name is required.")
            elif profile_logic.update_contact_details(
                profile, first_name, last_name, address, mobile_no, emergency_contact_no
            ) is None:
                st.error("Could not save your profile. Please try again.")
            else:
                st.success("Profile updated.")

    with qr_col:
        st.markdown("### Check-In QR")
        st.caption("Show this code to your coach to be marked present.")
        png = make_student_qr_png(profile.id)
        st.image(png, width=220)
        st.download_button(
            "Download QR Code",
            data=png,
            file_name=qr_filename(profile.id),
            mime="image/png",
        )


if __name__ == "__main__":
    main()
