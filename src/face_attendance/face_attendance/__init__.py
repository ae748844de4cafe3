"""Face Attendance backend package.

This package is organized by feature modules (students, subjects, attendance,
export) with a thin Flask controller layer over service/repository layers that
persist everything as flat CSV files.
"""
