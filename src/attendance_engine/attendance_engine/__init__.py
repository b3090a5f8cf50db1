"""Attendance Engine package.

Feature modules (sessions, summary, heatmap, urgency, requests) turn
already-fetched class data into view-models, with a thin Flask controller
layer on top of the service layer.
"""
