from livevote.services.validation import (
    to_columns,
    validate_ballot,
    validate_participant,
    validate_party_member,
    validate_password_change,
    validate_voter,
    PARTICIPANT_FIELDS,
)


def test_participant_requires_party_name():
    assert validate_participant({}) == ["Party name is required"]
    assert validate_participant({"partyName": "   "}) == ["Party name is required"]
    assert validate_participant({"partyName": "Red"}) == []


def test_partial_participant_update_only_checks_supplied_fields():
    assert validate_participant({"description": "new"}, partial=True) == []
    assert validate_participant({"partyName": ""}, partial=True) == ["Party name is required"]


def test_participant_seat_counts_must_be_non_negative_integers():
    errors = validate_participant(
        {"partyName": "Red", "directSeats": -1, "proportionalSeats": "many"}
    )
    assert errors == [
        "Direct seats cannot be negative",
        "Proportional seats must be a whole number",
    ]


def test_party_member_type_is_an_enumerated_tag():
    data = {"participantId": 1, "memberName": "Asha", "position": "Mayor", "type": "mixed"}
    assert validate_party_member(data) == ["Type must be one of: direct, proportional"]

    data["type"] = "proportional"
    assert validate_party_member(data) == []


def test_party_member_requires_owner_on_create_only():
    data = {"memberName": "Asha", "position": "Mayor", "type": "direct"}
    assert validate_party_member(data) == ["Participant ID is required"]
    assert validate_party_member({"wardNumber": 4}, partial=True) == []


def test_voter_requires_all_identity_fields():
    assert validate_voter({"voterId": "V1"}) == [
        "Voter name is required",
        "Citizenship number is required",
    ]


def test_ballot_candidate_ids_must_be_a_list():
    assert validate_ballot({"voterId": "V1", "partyId": 1, "candidateIds": "3"}) == [
        "candidateIds must be a list"
    ]


def test_password_change_enforces_minimum_length():
    assert validate_password_change({"currentPassword": "x", "newPassword": "short"}) == [
        "New password must be at least 8 characters long"
    ]


def test_non_object_payloads_are_rejected():
    assert validate_voter(["V1"]) == ["Request body must be a JSON object"]


def test_to_columns_maps_present_keys_and_strips_strings():
    columns = to_columns({"partyName": "  Red ", "partySymbol": "Star"}, PARTICIPANT_FIELDS)
    assert columns == {"party_name": "Red", "party_symbol": "Star"}


def test_text_fields_reject_non_string_values():
    assert validate_participant({"partyName": {"x": 1}}) == ["Party name must be text"]
    assert validate_participant({"partyName": "Red", "partyLogo": 5}) == [
        "Party logo must be text"
    ]
    assert validate_voter({"voterId": ["a"], "voterName": "Sita", "citizenshipNumber": 12}) == [
        "Voter ID must be text",
        "Citizenship number must be text",
    ]
    assert validate_password_change({"currentPassword": {}, "newPassword": "long-enough"}) == [
        "Current password must be text"
    ]


def test_party_member_type_must_be_a_string_tag():
    data = {"participantId": 1, "memberName": "Asha", "position": ["Mayor"], "type": ["direct"]}
    assert validate_party_member(data) == [
        "Position must be text",
        "Type must be one of: direct, proportional",
    ]


def test_ballot_voter_id_accepts_numbers_but_not_structures():
    assert validate_ballot({"voterId": 42, "partyId": 1}) == []
    assert validate_ballot({"voterId": {"id": "V1"}, "partyId": 1}) == ["Voter ID must be text"]
