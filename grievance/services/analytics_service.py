"""
Analytics Service
Read-only aggregation over the whole complaint set
"""

from collections import Counter
from datetime import datetime, timedelta

from extensions import db
from grievance.errors import AuthorizationError
from grievance.models.complaint import Complaint, ComplaintStatus

TIMELINE_DAYS = 7


class AnalyticsService:

    @staticmethod
    def compute(actor, now=None):
        """Aggregate counts, resolution time and the recent submission timeline"""
        if actor is None or not actor.is_admin:
            raise AuthorizationError('Admin access only')

        now = now or datetime.utcnow()
        total = Complaint.query.count()

        status_rows = (db.session.query(Complaint.status, db.func.count(Complaint.id))
                       .group_by(Complaint.status).all())
        by_status = {status.value: count for status, count in status_rows}

        priority_rows = (db.session.query(Complaint.priority, db.func.count(Complaint.id))
                         .group_by(Complaint.priority).all())
        by_priority = {priority.value: count for priority, count in priority_rows}

        category_rows = (db.session.query(Complaint.category, db.func.count(Complaint.id))
                         .group_by(Complaint.category).all())
        by_category = [
            {'category': category, 'count': count}
            for category, count in sorted(category_rows, key=lambda row: (-row[1], row[0]))
        ]

        return {
            'total': total,
            'byStatus': by_status,
            'byCategory': by_category,
            'byPriority': by_priority,
            'avgResolutionHours': AnalyticsService.average_resolution_hours(),
            'recentTimeline': AnalyticsService.recent_timeline(now),
        }

    @staticmethod
    def average_resolution_hours():
        """Mean hours from creation to resolution, or None when nothing is resolved"""
        rows = (db.session.query(Complaint.created_at, Complaint.resolved_at)
                .filter(Complaint.status == ComplaintStatus.RESOLVED,
                        Complaint.resolved_at.isnot(None))
                .all())
        if not rows:
            return None

        hours = [(resolved_at - created_at).total_seconds() / 3600
                 for created_at, resolved_at in rows]
        return sum(hours) / len(hours)

    @staticmethod
    def recent_timeline(now):
        """Complaints created per calendar day over the trailing week, oldest day first"""
        since = now - timedelta(days=TIMELINE_DAYS)
        created = (db.session.query(Complaint.created_at)
                   .filter(Complaint.created_at >= since)
                   .all())

        per_day = Counter(created_at.date() for (created_at,) in created)
        return [
            {'date': day.isoformat(), 'count': per_day[day]}
            for day in sorted(per_day)
        ]
