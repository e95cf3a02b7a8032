from livevote.extensions import db
from livevote.models import Participant, Voter


def leaderboard():
    return (
        Participant.query.order_by(
            Participant.vote_count.desc(), Participant.id.asc()
        ).all()
    )


def count_votes_cast():
    return Voter.query.filter_by(has_voted=True).count()


def turnout_percentage(total_votes, total_registered):
    if total_registered <= 0:
        return 0
    return f"{total_votes / total_registered * 100:.2f}"


def live_snapshot():
    """Payload pushed to connected clients on every results change."""
    return {
        "participants": [participant.to_dict() for participant in leaderboard()],
        "totalVotes": count_votes_cast(),
    }


def compute_results():
    participants = leaderboard()
    total_votes = count_votes_cast()
    total_registered = db.session.query(db.func.count(Voter.id)).scalar() or 0

    return {
        "participants": [participant.to_dict() for participant in participants],
        "totalVotes": total_votes,
        "totalRegisteredVoters": total_registered,
        "turnoutPercentage": turnout_percentage(total_votes, total_registered),
    }
