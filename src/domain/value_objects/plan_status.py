"""Plan status labels.

The plan status is stored as an opaque string; these are the labels the
repository writes itself.
"""

PLAN_STATUS_IN_PROGRESS = "В работе"
PLAN_STATUS_COMPLETED = "Завершен"
