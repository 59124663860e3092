"""HRMS Attendance package.

Feature modules (attendance, geofence, employees, branches, reports) with a
thin Flask controller layer on top of service/repository layers.
"""
