from flask import current_app
from sqlalchemy.exc import IntegrityError

from livevote.errors import DuplicateKey, NotFound, ValidationError
from livevote.extensions import db
from livevote.models import Participant, PartyMember, Voter
from livevote.services.broadcast import broadcast_results
from livevote.services.validation import (
    PARTICIPANT_FIELDS,
    PARTY_MEMBER_FIELDS,
    VOTER_FIELDS,
    to_columns,
    validate_participant,
    validate_party_member,
    validate_voter,
)

INTEGER_COLUMNS = ("direct_seats", "proportional_seats", "ward_number")


def _parse_id(raw_id):
    if isinstance(raw_id, bool):
        return None
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        return None


def _coerce_integers(columns):
    for column in INTEGER_COLUMNS:
        if column not in columns:
            continue
        value = columns[column]
        if value is None or value == "":
            columns[column] = 0 if column != "ward_number" else None
        else:
            columns[column] = int(value)
    return columns


def _commit_unique(duplicate_message):
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateKey(duplicate_message)


# --- Participants ---


def list_participants():
    return Participant.query.order_by(
        Participant.created_at.desc(), Participant.id.desc()
    ).all()


def get_participant(participant_id):
    parsed = _parse_id(participant_id)
    participant = (
        Participant.query.filter_by(id=parsed).first() if parsed is not None else None
    )
    if participant is None:
        raise NotFound("Participant not found")
    return participant


def create_participant(data):
    errors = validate_participant(data)
    if errors:
        raise ValidationError(errors)

    columns = _coerce_integers(to_columns(data, PARTICIPANT_FIELDS))
    participant = Participant(**columns)
    db.session.add(participant)
    _commit_unique("Party name already exists")

    current_app.logger.info("Participant %s registered", participant.party_name)
    broadcast_results()
    return participant


def update_participant(participant_id, data):
    errors = validate_participant(data, partial=True)
    if errors:
        raise ValidationError(errors)

    participant = get_participant(participant_id)
    for column, value in _coerce_integers(to_columns(data, PARTICIPANT_FIELDS)).items():
        setattr(participant, column, value)
    _commit_unique("Party name already exists")

    broadcast_results()
    return participant


def delete_participant(participant_id):
    participant = get_participant(participant_id)
    party_name = participant.party_name

    # members go with their party
    deleted_members = len(participant.members)
    db.session.delete(participant)
    db.session.commit()

    current_app.logger.info(
        "Participant %s deleted with %d member(s)", party_name, deleted_members
    )
    broadcast_results()
    return deleted_members


# --- Party members ---


def list_party_members(participant_id):
    parsed = _parse_id(participant_id)
    if parsed is None:
        return []
    return (
        PartyMember.query.filter_by(participant_id=parsed)
        .order_by(PartyMember.type.asc(), PartyMember.position.asc(), PartyMember.id.asc())
        .all()
    )


def get_party_member(member_id):
    parsed = _parse_id(member_id)
    member = PartyMember.query.filter_by(id=parsed).first() if parsed is not None else None
    if member is None:
        raise NotFound("Party member not found")
    return member


def create_party_member(data):
    errors = validate_party_member(data)
    if errors:
        raise ValidationError(errors)

    participant = get_participant(data["participantId"])
    columns = _coerce_integers(to_columns(data, PARTY_MEMBER_FIELDS))
    member = PartyMember(participant_id=participant.id, **columns)
    db.session.add(member)
    db.session.commit()

    current_app.logger.info(
        "Party member %s added to %s", member.member_name, participant.party_name
    )
    return member


def update_party_member(member_id, data):
    errors = validate_party_member(data, partial=True)
    if errors:
        raise ValidationError(errors)

    member = get_party_member(member_id)
    for column, value in _coerce_integers(to_columns(data, PARTY_MEMBER_FIELDS)).items():
        setattr(member, column, value)
    db.session.commit()
    return member


def delete_party_member(member_id):
    member = get_party_member(member_id)
    member_name = member.member_name
    db.session.delete(member)
    db.session.commit()
    current_app.logger.info("Party member %s deleted", member_name)


# --- Voters ---


def register_voter(data):
    errors = validate_voter(data)
    if errors:
        raise ValidationError(errors)

    voter = Voter(**to_columns(data, VOTER_FIELDS))
    db.session.add(voter)
    _commit_unique("Voter ID or Citizenship number already registered")

    current_app.logger.info("Voter %s registered", voter.voter_id)
    return voter


def get_voter_by_voter_id(voter_id):
    voter = Voter.query.filter_by(voter_id=voter_id).first()
    if voter is None:
        raise NotFound("Voter not found")
    return voter


def list_voters():
    return Voter.query.order_by(Voter.created_at.desc(), Voter.id.desc()).all()


def voter_details(voter):
    """Voter as JSON with the party reference resolved.

    A party deleted after the ballot was cast resolves to ``None``.
    """
    data = voter.to_dict()
    party = None
    if voter.voted_for_party_id is not None:
        party = Participant.query.filter_by(id=voter.voted_for_party_id).first()
    data["votedForParty"] = party.to_dict() if party else None
    return data
