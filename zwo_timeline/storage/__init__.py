"""Export helpers for timelines and workout summaries."""

from .export import export_timeline_csv, export_workout_summary_csv, workout_summary_frame

__all__ = ["export_timeline_csv", "export_workout_summary_csv", "workout_summary_frame"]
