"""
RMS Search Service

Aggregates data owned by the campus, employee, work order and batch services
into fully resolved views.
"""
