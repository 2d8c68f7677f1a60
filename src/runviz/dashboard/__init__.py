"""
Runviz web dashboard.

Single-page FastAPI application: upload a table, pick experiments, view one
line chart per metric.
"""
