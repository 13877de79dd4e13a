"""
Privacy Utilities
Display-time masking of personally identifiable information

These transforms are pure and deterministic but not idempotent: masking an
already masked value may alter it again. Mask once, at the read-model boundary,
never on the way into storage.
"""
import re
from typing import Callable, Optional, Union

from wardview.config.settings import get_settings

BULLET = "•"

_LETTER_DIGITS_ID = re.compile(r"^[A-Z]\d+$")
_ID_IN_TEXT = re.compile(r"\b[PS]\d{2,}\b")
_NAME_IN_TEXT = re.compile(
    r"\b(?:(?P<title>Dr|Mr|Mrs|Ms|Miss|Nurse)\.?\s+)?"
    r"(?P<name>[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+)\b"
)

# Capitalized words that appear in department names, alert types and
# timeline titles; a capitalized run containing one of them is not a name.
_NON_NAME_WORDS = frozenset({
    "Admission", "Alert", "Appointment", "Blood", "Cardiology", "Care", "Center",
    "Check", "Clinic", "Consultation", "Department", "Diagnostic", "Discharge",
    "Emergency", "Equipment", "Follow", "General", "Heart", "Hospital", "Initial",
    "Intensive", "Internal", "Machine", "Medication", "Medicine", "Neurology",
    "Oncology", "Orthopedics", "Oxygen", "Patient", "Pediatrics", "Pressure",
    "Prescribed", "Radiology", "Rate", "Room", "Saturation", "Scan", "Staff",
    "Surgery", "Temperature", "Testing", "Unit", "Update", "Vital", "Ward",
})


def mask_pii(full_name: Optional[str]) -> str:
    """Show only the first name and the initial of the last name"""
    if not full_name:
        return ""

    parts = full_name.split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]

    return f"{parts[0]} {parts[-1][0]}."


def mask_patient_id(patient_id: Union[str, int, None]) -> str:
    """Mask a patient id, keeping its leading letter and final digit"""
    if patient_id is None:
        return ""

    value = str(patient_id)
    if _LETTER_DIGITS_ID.match(value):
        return value[0] + BULLET * (len(value) - 2) + value[-1]

    if len(value) <= 2:
        return value
    return value[0] + BULLET * (len(value) - 2) + value[-1]


def mask_staff_id(staff_id: Optional[str]) -> str:
    """Replace every interior character of a staff id with '*'"""
    if not staff_id:
        return ""

    value = str(staff_id)
    if len(value) < 3:
        return value
    return value[0] + "*" * (len(value) - 2) + value[-1]


def mask_email(email: Optional[str]) -> str:
    """Mask the local part of an email address; the domain stays readable"""
    if not email or "@" not in email:
        return ""

    local, _, domain = email.partition("@")
    if len(local) > 2:
        local = local[0] + BULLET * (len(local) - 2) + local[-1]

    return f"{local}@{domain}"


def mask_phone_number(phone: Optional[str]) -> str:
    """Show only the last four digits of a phone number"""
    if not phone:
        return ""

    digits = re.sub(r"\D", "", str(phone))
    if len(digits) < 5:
        return digits

    return f"{BULLET * 3}-{BULLET * 3}-{digits[-4:]}"


def _mask_name_match(match: "re.Match") -> str:
    name = match.group("name")
    title = match.group("title")

    if not title and any(word in _NON_NAME_WORDS for word in name.split()):
        return match.group(0)

    masked = mask_pii(name)
    if title:
        prefix = match.group(0)[: match.start("name") - match.start(0)]
        return prefix + masked
    return masked


def mask_text_content(text: Optional[str]) -> str:
    """Best-effort masking of ids and personal names inside free text"""
    if not text:
        return ""

    masked = _ID_IN_TEXT.sub(lambda m: mask_patient_id(m.group(0)), text)
    return _NAME_IN_TEXT.sub(_mask_name_match, masked)


def can_view_full_pii(role: Optional[str] = None) -> bool:
    """Whether a caller role may see unmasked PII"""
    if not role:
        return False
    return role in get_settings().pii_viewer_roles


def conditionally_mask(value: str, mask_function: Callable[[str], str], role: Optional[str] = None) -> str:
    """Mask a value unless the caller role is allowed to see raw PII"""
    if can_view_full_pii(role):
        return value
    return mask_function(value)
