from checkin.models.attendee import AttendeeRecord, CheckInStatus, LookupResult, NOT_SPECIFIED


def test_resolves_capitalised_aliases():
    record = AttendeeRecord.model_validate({"Name": "John Doe", "Email": "john@example.com"})
    assert record.name == "John Doe"
    assert record.email == "john@example.com"


def test_first_non_empty_alias_wins():
    record = AttendeeRecord.model_validate({
        "fullName": "",
        "Name": "Jane Smith",
        "phone": None,
        "PhoneNumber": "+234 800 000 0000",
        "Phone": "ignored",
    })
    assert record.name == "Jane Smith"
    assert record.phone == "+234 800 000 0000"


def test_all_check_in_time_spellings_are_recognised():
    for key in ("checkInTime", "CheckInTime", "CheckIn Time"):
        record = AttendeeRecord.model_validate({key: "2025-03-01T09:30:00Z"})
        assert record.check_in_time == "2025-03-01T09:30:00Z"


def test_scalar_values_become_strings():
    record = AttendeeRecord.model_validate({"Name": "Ada", "Phone": 5551234})
    assert record.phone == "5551234"


def test_null_string_counts_as_missing():
    record = AttendeeRecord.model_validate({"RegistrationDate": "null"})
    assert record.registration_date is None


def test_display_fallbacks():
    record = AttendeeRecord.model_validate({})
    assert record.display_name == NOT_SPECIFIED
    assert record.display_email == NOT_SPECIFIED


def test_serialised_record_reads_back():
    record = AttendeeRecord.model_validate({
        "fullName": "Jane Smith", "Email": "jane@example.com", "ExperienceLevel": "Senior",
    })
    restored = AttendeeRecord.model_validate_json(record.model_dump_json(exclude_none=True))
    assert restored == record


def test_with_check_in_overlays_timestamp():
    record = AttendeeRecord(name="Jane Smith", check_in_time="old")
    updated = record.with_check_in("2025-03-01T09:30:00.000Z")
    assert updated.check_in_time == "2025-03-01T09:30:00.000Z"
    assert updated.name == "Jane Smith"
    assert record.check_in_time == "old"


def test_from_reply_parses_lookup_body():
    result = LookupResult.from_reply({
        "status": "CAN_CHECK_IN",
        "message": "Ready",
        "attendee": {"Name": "Jane Smith"},
    })
    assert result.kind is CheckInStatus.CAN_CHECK_IN
    assert result.message == "Ready"
    assert result.attendee.name == "Jane Smith"


def test_from_reply_tolerates_unexpected_shapes():
    assert LookupResult.from_reply([{"status": "SUCCESS"}]).status == ""
    assert LookupResult.from_reply({"message": "hm"}).kind is None
    assert LookupResult.from_reply({"status": "WEIRD"}).kind is None
    assert LookupResult.from_reply({"status": "NOT_FOUND", "attendee": "nope"}).attendee is None
