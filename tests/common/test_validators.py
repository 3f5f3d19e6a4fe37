from __future__ import annotations

import pytest

from dms_attendance.common.validators import require_non_empty, require_positive_int
from dms_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("raw,expected", [(7, 7), ("7", 7), (3.0, 3)])
def test_require_positive_int_accepts_integral_values(raw, expected):
    assert require_positive_int(raw, "student_id") == expected


@pytest.mark.parametrize("raw", [1.9, True, False, None, "abc", 0, -4, "1.5"])
def test_require_positive_int_rejects_non_integers(raw):
    with pytest.raises(ValidationError):
        require_positive_int(raw, "student_id")


def test_require_non_empty_strips():
    assert require_non_empty("  iris ", "Username") == "iris"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Username")
