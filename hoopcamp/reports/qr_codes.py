"""QR codes carrying a student's profile id for attendance scans."""

import io

import qrcode


def qr_filename(student_id: str) -> str:
    return f"student-qr-{student_id}.png"


def make_student_qr_png(student_id: str) -> bytes:
    """Encode the student id as a PNG QR code.

    The payload is the bare id: there is no signature or expiry, so anyone
    holding the code can check the student in.
    """
    image = qrcode.make(student_id)
    buffer = io.BytesIO()
    image.save(buffer)
    return buffer.getvalue()


def parse_scan_payload(payload: str | None) -> str | None:
    """Turn raw scanner input into a student id candidate."""
    if payload is None:
        return None
    payload = payload.strip()
    return payload or None
