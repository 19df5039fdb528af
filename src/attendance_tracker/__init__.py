"""Attendance Tracker package.

Feature modules (users, subjects, attendance) each carry a domain model,
a repository protocol with its MySQL implementation, a service and a thin
Flask controller.
"""
