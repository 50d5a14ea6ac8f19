"""
Complaint Model
"""

from extensions import db
from datetime import datetime
from enum import Enum


class ComplaintStatus(str, Enum):
    """Complaint status enum"""
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    RESOLVED = 'resolved'


class ComplaintPriority(str, Enum):
    """Complaint priority enum"""
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Complaint(db.Model):
    """Student grievance with a lifecycle status"""

    __tablename__ = 'complaints'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                           nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    priority = db.Column(
        db.Enum(ComplaintPriority, name='complaint_priority', values_callable=_enum_values),
        default=ComplaintPriority.MEDIUM,
        nullable=False
    )
    status = db.Column(
        db.Enum(ComplaintStatus, name='complaint_status', values_callable=_enum_values),
        default=ComplaintStatus.PENDING,
        nullable=False,
        index=True
    )

    # Student closing remark, written once after resolution
    feedback = db.Column(db.Text, nullable=True)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    resolved_at = db.Column(db.DateTime, nullable=True)

    history = db.relationship('StatusHistory', backref='complaint', lazy='dynamic',
                              cascade='all, delete-orphan',
                              order_by='StatusHistory.changed_at')

    def __init__(self, student_id, title, description, category,
                 priority=ComplaintPriority.MEDIUM, **kwargs):
        """Initialize a new complaint in the pending state"""
        now = datetime.utcnow()
        self.student_id = student_id
        self.title = title
        self.description = description
        self.category = category
        self.priority = ComplaintPriority(priority)
        self.status = ComplaintStatus.PENDING
        self.created_at = now
        self.updated_at = now
        self.resolved_at = None
        self.feedback = None

        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    @property
    def is_resolved(self):
        return self.status == ComplaintStatus.RESOLVED

    def apply_status(self, new_status, at=None):
        """Set the status and keep resolved_at in step with it.

        Returns the previous status. The caller owns the commit.
        """
        at = at or datetime.utcnow()
        old_status = self.status
        self.status = ComplaintStatus(new_status)
        self.resolved_at = at if self.status == ComplaintStatus.RESOLVED else None
        self.updated_at = at
        return old_status

    def can_receive_feedback(self):
        """Feedback is accepted once, and only on a resolved complaint"""
        return self.is_resolved and not self.feedback

    def to_dict(self, include_student=False):
        data = {
            'id': self.id,
            'student_id': self.student_id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'priority': self.priority.value,
            'status': self.status.value,
            'feedback': self.feedback,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
            'resolved_at': self.resolved_at.isoformat() if self.resolved_at else None,
        }

        if include_student and self.student:
            data['student_name'] = self.student.full_name
            data['student_email'] = self.student.email

        return data

    def __repr__(self):
        return f'<Complaint {self.id} {self.status.value}>'
