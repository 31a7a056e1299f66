# staffing_core/clinical_services/job_codes.py
from __future__ import annotations

import re

from staffing_core.clinical_services.models import SHIFT_CODES

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


def generate_job_code(
    *,
    department_name: str,
    hospital_code: str,
    service_code: str,
    job_type_code: str,
    shift_type: str,
    position_number: int,
) -> str:
    """
    [Dept][Hospital][Service][JobType][Shift]_[n], e.g. "CardioloMGHCICUMDWD_AM_1".
    Dept is the first 8 letters of the department name.
    """
    dept_code = _NON_LETTERS.sub("", department_name)[:8]
    shift_code = SHIFT_CODES.get(shift_type, shift_type)
    return f"{dept_code}{hospital_code}{service_code}{job_type_code}{shift_code}_{position_number}"
