"""Time Tracker package.

Organised by feature modules (users, attendance, reports, ...) with a thin
Flask controller layer on top of service and repository layers.
"""
