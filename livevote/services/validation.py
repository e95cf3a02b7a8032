"""Per-entity validation.

Every validator takes the decoded JSON body and returns a list of messages.
An empty list means the payload is acceptable; nothing here raises.
"""

from livevote.models import MEMBER_TYPES

PARTICIPANT_FIELDS = {
    "partyName": "party_name",
    "partyNameNepali": "party_name_nepali",
    "partySymbol": "party_symbol",
    "partyLogo": "party_logo",
    "description": "description",
    "directSeats": "direct_seats",
    "proportionalSeats": "proportional_seats",
}

PARTY_MEMBER_FIELDS = {
    "memberName": "member_name",
    "memberNameNepali": "member_name_nepali",
    "position": "position",
    "positionNepali": "position_nepali",
    "wardNumber": "ward_number",
    "type": "type",
}

VOTER_FIELDS = {
    "voterId": "voter_id",
    "voterName": "voter_name",
    "citizenshipNumber": "citizenship_number",
}

MIN_PASSWORD_LENGTH = 8


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _check_required(data, fields, partial):
    errors = []
    for field, label in fields:
        if partial and field not in data:
            continue
        if _is_blank(data.get(field)):
            errors.append(f"{label} is required")
    return errors


def _check_text(data, fields):
    errors = []
    for field, label in fields:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            errors.append(f"{label} must be text")
    return errors


def _check_non_negative_int(data, field, label):
    value = data.get(field)
    if value is None or value == "":
        return []
    if isinstance(value, bool):
        return [f"{label} must be a whole number"]
    try:
        number = int(value)
    except (TypeError, ValueError):
        return [f"{label} must be a whole number"]
    if number < 0:
        return [f"{label} cannot be negative"]
    return []


def validate_participant(data, partial=False):
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    errors = _check_required(data, [("partyName", "Party name")], partial)
    errors += _check_text(
        data,
        [
            ("partyName", "Party name"),
            ("partyNameNepali", "Party name (Nepali)"),
            ("partySymbol", "Party symbol"),
            ("partyLogo", "Party logo"),
            ("description", "Description"),
        ],
    )
    errors += _check_non_negative_int(data, "directSeats", "Direct seats")
    errors += _check_non_negative_int(data, "proportionalSeats", "Proportional seats")
    return errors


def validate_party_member(data, partial=False):
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    required = [("memberName", "Member name"), ("position", "Position"), ("type", "Type")]
    if not partial:
        required.insert(0, ("participantId", "Participant ID"))

    errors = _check_required(data, required, partial)
    errors += _check_text(
        data,
        [
            ("memberName", "Member name"),
            ("memberNameNepali", "Member name (Nepali)"),
            ("position", "Position"),
            ("positionNepali", "Position (Nepali)"),
        ],
    )

    member_type = data.get("type")
    if not _is_blank(member_type) and (
        not isinstance(member_type, str) or member_type not in MEMBER_TYPES
    ):
        errors.append(f"Type must be one of: {', '.join(MEMBER_TYPES)}")

    errors += _check_non_negative_int(data, "wardNumber", "Ward number")
    return errors


def validate_voter(data):
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    fields = [
        ("voterId", "Voter ID"),
        ("voterName", "Voter name"),
        ("citizenshipNumber", "Citizenship number"),
    ]
    return _check_required(data, fields, partial=False) + _check_text(data, fields)


def validate_ballot(data):
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    errors = []
    voter_id = data.get("voterId")
    if _is_blank(voter_id):
        errors.append("Voter ID is required")
    elif isinstance(voter_id, bool) or not isinstance(voter_id, (str, int)):
        errors.append("Voter ID must be text")
    if _is_blank(data.get("partyId", data.get("participantId"))):
        errors.append("Party ID is required")

    candidate_ids = data.get("candidateIds")
    if candidate_ids is not None and not isinstance(candidate_ids, list):
        errors.append("candidateIds must be a list")
    return errors


def validate_password_change(data):
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    errors = _check_required(
        data,
        [("currentPassword", "Current password"), ("newPassword", "New password")],
        partial=False,
    )
    errors += _check_text(
        data, [("currentPassword", "Current password"), ("newPassword", "New password")]
    )
    new_password = data.get("newPassword")
    if isinstance(new_password, str) and new_password and len(new_password) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"New password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return errors


def to_columns(data, field_map):
    """Map the camelCase keys present in ``data`` onto model column names."""
    columns = {}
    for field, column in field_map.items():
        if field not in data:
            continue
        value = data[field]
        if isinstance(value, str):
            value = value.strip()
        columns[column] = value
    return columns
