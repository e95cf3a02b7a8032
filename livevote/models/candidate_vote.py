from livevote.extensions import db


class CandidateVote(db.Model):
    """Snapshot of one direct vote inside a voter's ballot."""

    __tablename__ = "voter_candidate_votes"

    id = db.Column(db.Integer, primary_key=True)
    voter_id = db.Column(db.Integer, db.ForeignKey("voters.id"), nullable=False)
    member_id = db.Column(db.Integer, nullable=False)
    position = db.Column(db.String(200), nullable=True)
    member_name = db.Column(db.String(200), nullable=True)

    def to_dict(self):
        return {
            "memberId": self.member_id,
            "position": self.position,
            "memberName": self.member_name,
        }
