from datetime import datetime

from livevote.extensions import db


class Voter(db.Model):
    __tablename__ = "voters"

    id = db.Column(db.Integer, primary_key=True)
    voter_id = db.Column(db.String(50), unique=True, nullable=False)
    voter_name = db.Column(db.String(200), nullable=False)
    citizenship_number = db.Column(db.String(50), unique=True, nullable=False)
    has_voted = db.Column(db.Boolean, nullable=False, default=False)
    # Checked at cast time only, so these are plain ids rather than foreign keys.
    voted_for_party_id = db.Column(db.Integer, nullable=True)
    voted_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    candidate_votes = db.relationship(
        "CandidateVote",
        backref="voter",
        lazy=True,
        order_by="CandidateVote.id",
        cascade="all, delete-orphan",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "voterId": self.voter_id,
            "voterName": self.voter_name,
            "citizenshipNumber": self.citizenship_number,
            "hasVoted": self.has_voted,
            "votedForParty": self.voted_for_party_id,
            "votedForCandidates": [vote.to_dict() for vote in self.candidate_votes],
            "votedAt": self.voted_at.isoformat() if self.voted_at else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
