"""
Status History Model
Append-only log of complaint status transitions
"""

from extensions import db
from datetime import datetime
from grievance.models.complaint import ComplaintStatus, _enum_values


class StatusHistory(db.Model):
    __tablename__ = 'status_history'

    id = db.Column(db.Integer, primary_key=True)
    complaint_id = db.Column(db.Integer, db.ForeignKey('complaints.id', ondelete='CASCADE'),
                             nullable=False, index=True)
    old_status = db.Column(
        db.Enum(ComplaintStatus, name='history_old_status', values_callable=_enum_values),
        nullable=False
    )
    new_status = db.Column(
        db.Enum(ComplaintStatus, name='history_new_status', values_callable=_enum_values),
        nullable=False
    )
    changed_by = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    changed_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    actor = db.relationship('User', foreign_keys=[changed_by])

    def to_dict(self):
        return {
            'id': self.id,
            'complaint_id': self.complaint_id,
            'old_status': self.old_status.value,
            'new_status': self.new_status.value,
            'changed_by': self.changed_by,
            'changed_by_name': self.actor.full_name if self.actor else None,
            'changed_at': self.changed_at.isoformat() if self.changed_at else None,
        }
