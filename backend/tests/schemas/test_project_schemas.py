"""Request Schemas — project creation and invite bodies."""

from datetime import date

import pytest
from pydantic import ValidationError

from tracker.schemas.invite import InviteCreate
from tracker.schemas.project import ProjectCreate


def test_project_name_is_stripped():
    assert ProjectCreate(ProjectName="  Apollo  ").ProjectName == "Apollo"


def test_blank_project_name_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(ProjectName="   ")


def test_project_optional_fields_default_to_none():
    body = ProjectCreate(ProjectName="Apollo")
    assert body.ProjectDescription is None
    assert body.ProjectTarget is None


def test_project_dates_parse_from_iso():
    body = ProjectCreate(ProjectName="Apollo", ProjectStart="2026-01-05")
    assert body.ProjectStart == date(2026, 1, 5)


def test_invite_role_defaults_to_guest():
    assert InviteCreate(inviteeEmail="carol@x.com").invitedForRole == "Guest"


def test_invitee_email_kept_verbatim():
    assert InviteCreate(inviteeEmail="Carol@X.com").inviteeEmail == "Carol@X.com"


@pytest.mark.parametrize("email", ["carol", "carol@@x.com", "carol @x.com", ""])
def test_malformed_invitee_email_rejected(email):
    with pytest.raises(ValidationError):
        InviteCreate(inviteeEmail=email)
