"""Tests for main admin and sub-admin role management."""

import pytest

from learnsmart.application.use_cases.admin import (
    add_sub_admin,
    is_content_manager,
    is_main_admin,
    is_sub_admin,
    list_sub_admins,
    remove_sub_admin,
)
from learnsmart.domain.errors import AlreadyExistsError, ForbiddenError, NotFoundError


def test_main_admin_is_matched_by_email(main_admin, make_user) -> None:
    student = make_user("student@example.com")

    assert is_main_admin(main_admin)
    assert not is_main_admin(student)
    assert not is_main_admin(None)


def test_main_admin_grants_and_revokes_sub_admin(db_session, main_admin, make_user) -> None:
    student = make_user("student@example.com")
    assert not is_content_manager(db_session, student)

    role = add_sub_admin(db_session, actor=main_admin, target_user_id=student.id)

    assert role.user_id == student.id
    assert role.created_by == main_admin.id
    assert role.email == "student@example.com"
    assert is_sub_admin(db_session, student)
    assert is_content_manager(db_session, student)
    assert [item.user_id for item in list_sub_admins(db_session)] == [student.id]

    remove_sub_admin(db_session, actor=main_admin, target_user_id=student.id)
    remove_sub_admin(db_session, actor=main_admin, target_user_id=student.id)
    assert not is_sub_admin(db_session, student)


def test_only_main_admin_can_grant(db_session, main_admin, make_user) -> None:
    sub_admin = make_user("sub@example.com")
    student = make_user("student@example.com")
    add_sub_admin(db_session, actor=main_admin, target_user_id=sub_admin.id)

    with pytest.raises(ForbiddenError):
        add_sub_admin(db_session, actor=sub_admin, target_user_id=student.id)
    assert [item.user_id for item in list_sub_admins(db_session)] == [sub_admin.id]
    assert not is_sub_admin(db_session, student)
    with pytest.raises(ForbiddenError):
        remove_sub_admin(db_session, actor=sub_admin, target_user_id=sub_admin.id)
    assert is_sub_admin(db_session, sub_admin)


def test_duplicate_grant_is_rejected(db_session, main_admin, make_user) -> None:
    student = make_user("student@example.com")
    add_sub_admin(db_session, actor=main_admin, target_user_id=student.id)

    with pytest.raises(AlreadyExistsError):
        add_sub_admin(db_session, actor=main_admin, target_user_id=student.id)
    assert len(list_sub_admins(db_session)) == 1


def test_unknown_target_is_rejected(db_session, main_admin) -> None:
    with pytest.raises(NotFoundError):
        add_sub_admin(db_session, actor=main_admin, target_user_id="missing")
