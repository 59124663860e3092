import pytest
from werkzeug.security import generate_password_hash

from src.hrms_attendance.hrms_attendance.core.exceptions import AuthenticationError, ValidationError
from src.hrms_attendance.hrms_attendance.employees.service import AuthService
from tests.fakes import InMemoryEmployees, make_employee


def _service(**kw) -> AuthService:
    employee = make_employee(1, username="asha", password_hash=generate_password_hash("pw123"), **kw)
    return AuthService(InMemoryEmployees({1: employee}))


def test_authenticate_success():
    s_employee = _service().authenticate("asha", "pw123")

    assert s_employee.employee_id == 1
    assert s_employee.branch_id == 1


def test_authenticate_wrong_password():
    with pytest.raises(AuthenticationError):
        _service().authenticate("asha", "nope")


def test_authenticate_inactive_employee():
    with pytest.raises(AuthenticationError):
        _service(is_active=False).authenticate("asha", "pw123")


def test_authenticate_placeholder_hash_is_rejected():
    svc = AuthService(InMemoryEmployees({1: make_employee(1, username="asha", password_hash="CHANGE_ME")}))

    with pytest.raises(AuthenticationError):
        svc.authenticate("asha", "CHANGE_ME")


def test_authenticate_requires_username():
    with pytest.raises(ValidationError):
        _service().authenticate("  ", "pw123")


@pytest.mark.parametrize("username", [5, None, ["asha"]])
def test_authenticate_rejects_non_string_username(username):
    with pytest.raises(ValidationError):
        _service().authenticate(username, "pw123")


def test_authenticate_rejects_non_string_password():
    with pytest.raises(AuthenticationError):
        _service().authenticate("asha", 123)
