"""
Visit subsystem.

Components:
- visit_models.py: data structures (Visit, FilterStatus, SortKey), errors, seed data
- visit_store.py: in-memory keyed store + query/bulk helpers
- visit_view.py: plain-text rendering of query results and counters
- visit_api.py: confirmation-guarded helpers used by the interaction layer
"""
