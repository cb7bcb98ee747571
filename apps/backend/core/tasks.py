from celery import shared_task

from .models import ProgressEntry
from .services.ai import analyze_progress
from .services.ai.context import progress_entry_line
from .storage import storage


@shared_task
def refresh_progress_insights_task(entry_id):
    entry = ProgressEntry.objects.get(id=entry_id)
    entries = storage.get_progress_entries(entry.user_id)
    insights = analyze_progress([progress_entry_line(e) for e in entries])
    storage.update_progress_insights(entry.id, insights)
    return insights
