"""
Complaint Service
The only code path that mutates complaint status, resolution time or feedback
"""

from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from grievance.errors import (
    AuthorizationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from grievance.models.complaint import Complaint, ComplaintPriority, ComplaintStatus
from grievance.models.status_history import StatusHistory


def _require_text(value, field):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{field} is required')
    return value.strip()


def _require_admin(actor):
    if actor is None or not actor.is_admin:
        raise AuthorizationError('Admin access only')


class ComplaintService:
    """Complaint lifecycle manager.

    ``observers`` receive ``on_transition(complaint, old_status, new_status, actor)``
    after a status change is committed. Their failures are logged and swallowed so
    the committed transition always stands.
    """

    def __init__(self, observers=None):
        self.observers = list(observers or [])

    def submit(self, student_id, title, description, category, priority=None):
        """Create a pending complaint owned by ``student_id``"""
        title = _require_text(title, 'title')
        description = _require_text(description, 'description')
        category = _require_text(category, 'category')

        if priority is None or (isinstance(priority, str) and not priority.strip()):
            priority = ComplaintPriority.MEDIUM
        if not isinstance(priority, ComplaintPriority):
            try:
                priority = ComplaintPriority(str(priority).strip().lower())
            except ValueError:
                raise ValidationError('priority must be one of: low, medium, high')

        complaint = Complaint(
            student_id=student_id,
            title=title,
            description=description,
            category=category,
            priority=priority,
        )
        self._commit(complaint, 'submit complaint')
        current_app.logger.info(f'Complaint {complaint.id} submitted by user {student_id}')
        return complaint

    def transition_status(self, actor, complaint_id, new_status):
        """Move a complaint to ``new_status``; any status may follow any other"""
        _require_admin(actor)
        try:
            new_status = ComplaintStatus(new_status)
        except ValueError:
            raise ValidationError('status must be one of: pending, in_progress, resolved')

        complaint = self._get_or_404(complaint_id)
        old_status = complaint.apply_status(new_status, at=datetime.utcnow())
        self._commit(complaint, 'update complaint status')

        if old_status != new_status:
            self._notify(complaint, old_status, new_status, actor)
        return complaint

    def attach_feedback(self, actor, complaint_id, feedback_text):
        """Store the owning student's closing remark on a resolved complaint"""
        complaint = self._get_or_404(complaint_id)
        if complaint.student_id != actor.id:
            raise AuthorizationError('Only the student who submitted this complaint can leave feedback')

        feedback_text = _require_text(feedback_text, 'feedback')
        if not complaint.is_resolved:
            raise ValidationError('Feedback can only be given on a resolved complaint')
        if complaint.feedback:
            raise ValidationError('Feedback has already been submitted for this complaint')

        complaint.feedback = feedback_text
        self._commit(complaint, 'save feedback')
        return complaint

    def get_complaint(self, actor, complaint_id):
        """Complaint detail, visible to its owner and to admins"""
        complaint = self._get_or_404(complaint_id)
        if complaint.student_id != actor.id and not actor.is_admin:
            raise AuthorizationError('You do not have access to this complaint')
        return complaint

    def list_for_student(self, student_id):
        return (Complaint.query
                .filter_by(student_id=student_id)
                .order_by(Complaint.created_at.desc(), Complaint.id.desc())
                .all())

    def list_all(self, actor):
        _require_admin(actor)
        return Complaint.query.order_by(Complaint.created_at.desc(), Complaint.id.desc()).all()

    def list_feedback(self, actor):
        """Every complaint that carries student feedback, newest first"""
        _require_admin(actor)
        return (Complaint.query
                .filter(Complaint.feedback.isnot(None))
                .order_by(Complaint.created_at.desc(), Complaint.id.desc())
                .all())

    def history_for(self, actor, complaint_id):
        _require_admin(actor)
        complaint = self._get_or_404(complaint_id)
        return (StatusHistory.query
                .filter_by(complaint_id=complaint.id)
                .order_by(StatusHistory.changed_at.asc(), StatusHistory.id.asc())
                .all())

    def _get_or_404(self, complaint_id):
        complaint = db.session.get(Complaint, complaint_id)
        if complaint is None:
            raise NotFoundError('Complaint not found')
        return complaint

    def _commit(self, complaint, action):
        try:
            db.session.add(complaint)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'Failed to {action}: {str(e)}')
            raise PersistenceError(detail=str(e))

    def _notify(self, complaint, old_status, new_status, actor):
        for observer in self.observers:
            try:
                observer.on_transition(complaint, old_status, new_status, actor)
            except Exception as e:
                current_app.logger.warning(
                    f'{type(observer).__name__} failed for complaint {complaint.id}: {str(e)}'
                )
