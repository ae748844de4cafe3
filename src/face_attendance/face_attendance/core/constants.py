"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STUDENTS_FILE_NAME = "students_data.csv"
SUBJECTS_FILE_NAME = "subjects_data.csv"
ATTENDANCE_DIR_NAME = "attendance"
SHEET_SUFFIX = "_attendance.csv"

STUDENT_FIELDS = ("name", "roll", "descriptors")
SUBJECT_FIELDS = ("subject",)
SHEET_FIXED_FIELDS = ("name", "roll")

PRESENT_MARK = "Present"
DATE_FORMAT = "%Y-%m-%d"

# The sheet stores no time of day; query results carry a fixed value.
DEFAULT_ENTRY_TIME = "00:00:00"

BUNDLE_FILE_NAME = "attendance_system_data.zip"
BUNDLE_COMPRESS_LEVEL = 9
