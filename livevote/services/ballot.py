"""Casting a ballot: the one-way ``has_voted`` transition for a voter.

A ballot is a proportional vote for one party plus optional direct votes for
candidates. All writes belonging to a ballot go out in a single transaction,
and the voter row is flipped with a conditional update so two concurrent
ballots for the same voter cannot both succeed.
"""

from datetime import datetime

from flask import current_app

from livevote.errors import AlreadyVoted, PartyNotFound, ValidationError, VoterNotFound
from livevote.extensions import db
from livevote.models import CandidateVote, Participant, PartyMember, Voter
from livevote.services.broadcast import broadcast_results
from livevote.services.validation import validate_ballot


def _as_int(value):
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_candidates(candidate_ids):
    """Load the members named in a ballot, in ballot order.

    Unknown ids are skipped instead of failing the ballot, and an id listed
    twice only counts once.
    """
    members = []
    seen = set()
    for raw_id in candidate_ids or []:
        member_id = _as_int(raw_id)
        if member_id is None or member_id in seen:
            continue
        seen.add(member_id)

        member = PartyMember.query.filter_by(id=member_id).first()
        if member is None:
            current_app.logger.warning("Skipping unknown candidate id %r", raw_id)
            continue
        members.append(member)
    return members


def cast_ballot(voter_id, party_id, candidate_ids=None):
    voter = Voter.query.filter_by(voter_id=str(voter_id)).first()
    if voter is None:
        raise VoterNotFound()

    if voter.has_voted:
        current_app.logger.warning("Rejected second ballot from voter %s", voter.voter_id)
        raise AlreadyVoted()

    party_pk = _as_int(party_id)
    participant = (
        Participant.query.filter_by(id=party_pk).first() if party_pk is not None else None
    )
    if participant is None:
        raise PartyNotFound()

    members = resolve_candidates(candidate_ids)
    voted_at = datetime.utcnow()

    claimed = Voter.query.filter_by(id=voter.id, has_voted=False).update(
        {
            Voter.has_voted: True,
            Voter.voted_for_party_id: participant.id,
            Voter.voted_at: voted_at,
        },
        synchronize_session=False,
    )
    if claimed != 1:
        db.session.rollback()
        current_app.logger.warning("Concurrent ballot lost for voter %s", voter.voter_id)
        raise AlreadyVoted()

    counted = Participant.query.filter_by(id=participant.id).update(
        {Participant.vote_count: Participant.vote_count + 1},
        synchronize_session=False,
    )
    if counted != 1:
        # party deleted since it was loaded; the voter claim rolls back with it
        db.session.rollback()
        current_app.logger.warning(
            "Party %s vanished before ballot of voter %s was counted",
            participant.id,
            voter.voter_id,
        )
        raise PartyNotFound()

    for member in members:
        PartyMember.query.filter_by(id=member.id).update(
            {PartyMember.vote_count: PartyMember.vote_count + 1},
            synchronize_session=False,
        )
        db.session.add(
            CandidateVote(
                voter_id=voter.id,
                member_id=member.id,
                position=member.position,
                member_name=member.member_name,
            )
        )

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(
        "Ballot accepted for voter %s (party %s, %d candidate(s))",
        voter.voter_id,
        participant.id,
        len(members),
    )

    broadcast_results()

    # commit expired both rows; reload to report the committed counters
    db.session.refresh(voter)
    db.session.refresh(participant)
    return voter, participant


def cast_ballot_from_payload(data):
    errors = validate_ballot(data)
    if errors:
        raise ValidationError(errors)

    return cast_ballot(
        data["voterId"],
        data.get("partyId", data.get("participantId")),
        data.get("candidateIds") or [],
    )
