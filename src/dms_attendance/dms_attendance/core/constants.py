"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

MARK_ATTENDANCE_ACTION = "Mark Attendance"

ABSENCE_ALERT_SUBJECT = "Missed Class Alert"
ABSENCE_ALERT_BODY = "You have been marked absent for the class on {date}"
# Absence alerts are dispatched immediately.
ABSENCE_ALERT_DELAY_SECONDS = 0

DEFAULT_SESSION_DAYS = 7
