from wardview.utils.privacy import (
    can_view_full_pii, conditionally_mask, mask_email, mask_patient_id, mask_phone_number,
    mask_pii, mask_staff_id, mask_text_content
)


def test_mask_pii_keeps_first_name_and_last_initial():
    assert mask_pii("Sarah Johnson") == "Sarah J."
    assert mask_pii("Mary Ann Smith") == "Mary S."
    assert mask_pii("Cher") == "Cher"
    assert mask_pii("") == ""
    assert mask_pii(None) == ""
    assert mask_pii("   ") == ""


def test_mask_patient_id():
    assert mask_patient_id("P001") == "P••1"
    assert mask_patient_id("P12345") == "P••••5"
    assert mask_patient_id(12345) == "1•••5"
    assert mask_patient_id("AB") == "AB"
    assert mask_patient_id("abc-9") == "a•••9"
    assert mask_patient_id(None) == ""


def test_mask_patient_id_preserves_length():
    for value in ("P001", "P9", "X123456", "id-00042"):
        assert len(mask_patient_id(value)) == len(value)


def test_mask_staff_id():
    assert mask_staff_id("S001") == "S**1"
    assert mask_staff_id("S1") == "S1"
    assert mask_staff_id("") == ""
    assert mask_staff_id(None) == ""


def test_mask_email():
    assert mask_email("sarah.johnson@email.com") == "s" + "•" * 11 + "n@email.com"
    assert mask_email("ab@x.org") == "ab@x.org"
    assert mask_email("not-an-email") == ""
    assert mask_email(None) == ""


def test_mask_phone_number():
    assert mask_phone_number("(555) 123-4567") == "•••-•••-4567"
    assert mask_phone_number("1234") == "1234"
    assert mask_phone_number("ext. 12") == "12"
    assert mask_phone_number("") == ""


def test_mask_text_content_masks_titled_names():
    text = "Admitted to Cardiology department under Dr. Michael Chen"
    assert mask_text_content(text) == "Admitted to Cardiology department under Dr. Michael C."


def test_mask_text_content_masks_ids():
    assert mask_text_content("Patient P001 - High blood pressure reading") == \
        "Patient P••1 - High blood pressure reading"


def test_mask_text_content_leaves_departments_alone():
    assert mask_text_content("Emma Davis admitted to Emergency Department") == \
        "Emma D. admitted to Emergency Department"
    assert mask_text_content("X-Ray Machine #1 scheduled for maintenance") == \
        "X-Ray Machine #1 scheduled for maintenance"


def test_mask_text_content_leaves_clinical_tokens_alone():
    assert mask_text_content("Low B12 and vitamin D3, recheck for S001") == \
        "Low B12 and vitamin D3, recheck for S••1"


def test_mask_text_content_empty():
    assert mask_text_content(None) == ""
    assert mask_text_content("") == ""


def test_nobody_sees_pii_by_default():
    assert can_view_full_pii(None) is False
    assert can_view_full_pii("physician") is False
    assert conditionally_mask("Sarah Johnson", mask_pii, "physician") == "Sarah J."


def test_configured_role_sees_raw_values(pii_viewer):
    assert can_view_full_pii(pii_viewer) is True
    assert can_view_full_pii("receptionist") is False
    assert conditionally_mask("Sarah Johnson", mask_pii, pii_viewer) == "Sarah Johnson"
    assert conditionally_mask("Sarah Johnson", mask_pii, "receptionist") == "Sarah J."
