"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7

EMPLOYEES_TABLE = "employees"
SHIFTS_TABLE = "shifts"
PRESETS_TABLE = "shift_presets"
SHIFT_CONFLICT_KEY = "employee_id,date"
