"""Tests for the adoption application use cases."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.application.use_cases.applications import (
    get_application,
    list_applications,
    review_application,
    save_draft,
    submit_application,
    withdraw_application,
)
from app.application.use_cases.effects import apply_effect
from app.domain.entities import ApplicationStatusUpdate, WorkflowEffect
from app.domain.errors import (
    ApplicationIncomplete,
    DuplicateApplication,
    Forbidden,
    InvalidTransition,
    NotFound,
    PetUnavailable,
)
from app.infrastructure.repositories import ApplicationRepository, NotificationRepository


def _under_review(session, catalog, profile):
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=profile
    )
    return review_application(session, catalog.staff, application.id, status="under_review")


def test_submit_creates_submitted_application(session, catalog, full_profile) -> None:
    submitted_at = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile, now=submitted_at
    )

    assert application.id is not None
    assert application.status == "submitted"
    assert application.submitted_at == submitted_at
    assert application.profile.first_name == "Ana"
    assert application.profile.agreements == ["home_visit", "return_policy"]


def test_duplicate_submission_until_withdrawn(session, catalog, full_profile) -> None:
    first = submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)

    with pytest.raises(DuplicateApplication):
        submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)

    withdrawn = withdraw_application(session, catalog.adopter, first.id)
    assert withdrawn.status == "withdrawn"

    second = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )
    assert second.id != first.id
    assert second.status == "submitted"


def test_other_pairs_are_independent(session, catalog, full_profile) -> None:
    submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)

    other_pet = submit_application(
        session, catalog.adopter, pet_id=catalog.second_pet.id, profile=full_profile
    )
    other_adopter = submit_application(
        session, catalog.other_adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    assert other_pet.status == "submitted"
    assert other_adopter.status == "submitted"


def test_store_rejects_second_open_application_for_pair(session, catalog, full_profile) -> None:
    from app.domain.entities import ApplicantProfile, Application
    from sqlalchemy.exc import IntegrityError

    submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)
    repository = ApplicationRepository(session)

    with pytest.raises(IntegrityError):
        repository.create(
            Application(
                id=None,
                pet_id=catalog.pet.id,
                adopter_id=catalog.adopter.user_id,
                status="submitted",
                profile=ApplicantProfile(**full_profile),
            )
        )
    session.rollback()


def test_missing_required_fields_are_reported(session, catalog, full_profile) -> None:
    del full_profile["phone"]
    full_profile["occupation"] = "   "

    with pytest.raises(ApplicationIncomplete) as excinfo:
        submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)

    assert excinfo.value.missing_fields == ["phone", "occupation"]
    assert list_applications(session, catalog.adopter) == []


def test_unavailable_pet_cannot_be_applied_for(session, catalog, full_profile) -> None:
    with pytest.raises(PetUnavailable):
        submit_application(
            session, catalog.adopter, pet_id=catalog.adopted_pet.id, profile=full_profile
        )
    with pytest.raises(NotFound):
        submit_application(session, catalog.adopter, pet_id=9999, profile=full_profile)


def test_shelters_cannot_submit(session, catalog, full_profile) -> None:
    with pytest.raises(Forbidden):
        submit_application(session, catalog.staff, pet_id=catalog.pet.id, profile=full_profile)


def test_draft_is_merged_and_promoted_on_submit(session, catalog) -> None:
    draft = save_draft(
        session,
        catalog.adopter,
        pet_id=catalog.pet.id,
        profile={"first_name": "Ana", "last_name": "Lopez"},
    )
    assert draft.status == "draft"

    again = save_draft(
        session, catalog.adopter, pet_id=catalog.pet.id, profile={"phone": "555-0100"}
    )
    assert again.id == draft.id
    assert again.profile.first_name == "Ana"
    assert again.profile.phone == "555-0100"

    submitted = submit_application(
        session,
        catalog.adopter,
        pet_id=catalog.pet.id,
        profile={
            "email": "ana@example.com",
            "date_of_birth": "1990-04-02",
            "occupation": "Nurse",
        },
    )

    assert submitted.id == draft.id
    assert submitted.status == "submitted"
    assert submitted.submitted_at is not None
    assert submitted.profile.last_name == "Lopez"


def test_draft_cannot_replace_a_submitted_application(session, catalog, full_profile) -> None:
    submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)

    with pytest.raises(DuplicateApplication):
        save_draft(session, catalog.adopter, pet_id=catalog.pet.id, profile={"first_name": "A"})


def test_concurrent_draft_submission_is_a_duplicate(
    session, catalog, full_profile, monkeypatch: pytest.MonkeyPatch
) -> None:
    stale = save_draft(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)
    submitted = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    # A second request that read the pair before the first one promoted the draft.
    monkeypatch.setattr(
        ApplicationRepository,
        "get_open_for_pair",
        lambda self, *, pet_id, adopter_id: stale,
    )
    with pytest.raises(DuplicateApplication):
        submit_application(
            session,
            catalog.adopter,
            pet_id=catalog.pet.id,
            profile={**full_profile, "occupation": "Chef"},
        )
    monkeypatch.undo()

    current = get_application(session, catalog.adopter, submitted.id)
    assert current.status == "submitted"
    assert current.profile.occupation == "Nurse"


def test_review_path_to_approval_notifies_adopter(session, catalog, full_profile) -> None:
    application = _under_review(session, catalog, full_profile)
    assert application.status == "under_review"

    application = review_application(
        session, catalog.staff, application.id, status="pending_approval"
    )
    decided_at = datetime(2024, 2, 1, 10, 0, tzinfo=timezone.utc)
    application = review_application(
        session,
        catalog.staff,
        application.id,
        status="approved",
        reviewer_notes="Great match",
        now=decided_at,
    )

    assert application.status == "approved"
    assert application.reviewed_at == decided_at
    assert application.reviewer_notes == "Great match"
    notifications = NotificationRepository(session).list_for_user(catalog.adopter.user_id)
    assert [item.type for item in notifications] == ["general"]
    assert notifications[0].metadata["application_status"] == "approved"

    with pytest.raises(InvalidTransition):
        withdraw_application(session, catalog.adopter, application.id)


def test_review_cannot_skip_states(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    with pytest.raises(InvalidTransition):
        review_application(session, catalog.staff, application.id, status="approved")
    with pytest.raises(InvalidTransition):
        review_application(session, catalog.staff, application.id, status="meet_greet_scheduled")

    assert get_application(session, catalog.adopter, application.id).status == "submitted"


def test_review_is_limited_to_the_owning_shelter(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    with pytest.raises(Forbidden):
        review_application(session, catalog.other_staff, application.id, status="under_review")
    with pytest.raises(Forbidden):
        review_application(session, catalog.adopter, application.id, status="under_review")


def test_stale_status_update_is_rejected(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )
    review_application(session, catalog.staff, application.id, status="under_review")

    stale = WorkflowEffect(
        application_update=ApplicationStatusUpdate(
            application_id=application.id,
            expected_status="submitted",
            target_status="under_review",
        )
    )
    with pytest.raises(InvalidTransition):
        apply_effect(session, stale)
    session.rollback()


def test_withdrawal_after_review_notifies_shelter(session, catalog, full_profile) -> None:
    application = _under_review(session, catalog, full_profile)

    withdraw_application(session, catalog.adopter, application.id)

    notifications = NotificationRepository(session).list_for_user(catalog.shelter.user_id)
    assert len(notifications) == 1
    assert notifications[0].type == "general"
    assert notifications[0].metadata["previous_status"] == "under_review"


def test_withdrawal_of_fresh_submission_is_silent(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    withdraw_application(session, catalog.adopter, application.id)

    assert NotificationRepository(session).list_for_user(catalog.shelter.user_id) == []


def test_only_owner_can_withdraw(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    with pytest.raises(Forbidden):
        withdraw_application(session, catalog.other_adopter, application.id)
    with pytest.raises(Forbidden):
        withdraw_application(session, catalog.staff, application.id)


def test_visibility_of_applications(session, catalog, full_profile) -> None:
    mine = submit_application(session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile)
    foreign = submit_application(
        session, catalog.other_adopter, pet_id=catalog.other_pet.id, profile=full_profile
    )

    assert [item.id for item in list_applications(session, catalog.adopter)] == [mine.id]
    assert [item.id for item in list_applications(session, catalog.staff)] == [mine.id]
    assert [item.id for item in list_applications(session, catalog.other_staff)] == [foreign.id]
    assert list_applications(session, catalog.staff, status="approved") == []

    assert get_application(session, catalog.staff, mine.id).id == mine.id
    with pytest.raises(Forbidden):
        get_application(session, catalog.other_staff, mine.id)
    with pytest.raises(Forbidden):
        get_application(session, catalog.other_adopter, mine.id)
    with pytest.raises(NotFound):
        get_application(session, catalog.adopter, 9999)
