"""
Contract Validation Module

JSON Schema контракты для wire-формы календарных значений.
"""

from .validators import (
    CIVIL_DATE_CONTRACT,
    LEAP_OFFSET_CONTRACT,
    SCHEMA_DIR,
    check_contract,
    contract_errors,
    contract_validator,
    load_schema,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "CIVIL_DATE_CONTRACT",
    "LEAP_OFFSET_CONTRACT",
    # Functions
    "load_schema",
    "contract_validator",
    "check_contract",
    "contract_errors",
]
