"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import EmploymentType

CHECK_IN_START_MINUTES = 6 * 60
CHECK_IN_END_MINUTES = 15 * 60
CHECK_IN_STEP_MINUTES = 15

# Present at or after this time is billed as Half Present.
HALF_DAY_CUTOFF = "08:00"

NO_TIME = "-"
ALL_STATUSES = "All"

EXCLUDED_EMPLOYMENT_TYPES = frozenset({EmploymentType.REMOTE.value, EmploymentType.MYSELF.value})

EMPLOYEES_COLLECTION = "employees"
ATTENDANCE_COLLECTION = "employeesattendance"
EMPLOYEE_ATTENDANCE_SUBCOLLECTION = "attendance"
SALARIES_SUBCOLLECTION = "salaries"
FROZEN_EMPLOYEES_COLLECTION = "exEmployees"
FROZEN_SALARIES_SUBCOLLECTION = "exSalaries"

DEFAULT_MONGO_TIMEOUT_MS = 5000
