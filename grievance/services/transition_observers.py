"""
Transition observers

The complaint service notifies these after a status change has been
committed. They must not assume they run inside the primary transaction.
"""

from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from grievance.models.status_history import StatusHistory


class StatusHistoryRecorder:
    """Appends one StatusHistory row per status change"""

    def on_transition(self, complaint, old_status, new_status, actor):
        entry = StatusHistory(
            complaint_id=complaint.id,
            old_status=old_status,
            new_status=new_status,
            changed_by=actor.id,
            changed_at=datetime.utcnow(),
        )
        try:
            db.session.add(entry)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return entry


class TransitionLogger:
    """Writes an audit line for every status change"""

    def on_transition(self, complaint, old_status, new_status, actor):
        current_app.logger.info(
            f'Complaint {complaint.id} moved {old_status.value} -> {new_status.value} '
            f'by user {actor.id}'
        )
