"""Unit tests for the five principle samples."""

from __future__ import annotations

import math
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from solid_principles.registry import MissingCapability, default_registry
from solid_principles.samples import SAMPLES, get_sample
from solid_principles.samples.dependency_inversion import (
    DATABASE,
    BusinessLogic,
    MySQL,
    PostgreSQL,
    QueryResult,
)
from solid_principles.samples.interface_segregation import (
    LIVING_WORKER,
    Human,
    Robot,
    run_day,
    run_shift,
)
from solid_principles.samples.liskov_substitution import Ostrich, Sparrow, let_fly, let_walk
from solid_principles.samples.open_closed import Circle, Rectangle, calculate_area
from solid_principles.samples.single_responsibility import (
    EmailService,
    User,
    UserRepository,
    register_user,
)


# Single responsibility


def test_register_user_saves_and_sends_welcome() -> None:
    repository = UserRepository()
    mailer = EmailService(sender="hello@example.com")
    user = User(name="Grace", email="Grace@Example.com")

    message = register_user(user, store=repository, mailer=mailer)

    assert repository.get("grace@example.com") == user
    assert mailer.outbox == [message]
    assert message.to == "grace@example.com"
    assert message.sender == "hello@example.com"
    assert message.subject == "Welcome, Grace!"


def test_register_user_accepts_any_store() -> None:
    store = Mock()
    mailer = EmailService()

    register_user(User(name="Ada", email="ada@example.com"), store=store, mailer=mailer)

    store.save.assert_called_once()


def test_register_user_rejects_store_without_save() -> None:
    with pytest.raises(MissingCapability):
        register_user(
            User(name="Ada", email="ada@example.com"),
            store=EmailService(),
            mailer=EmailService(),
        )


@pytest.mark.parametrize("email", ["nope", "@example.com", "ada@localhost"])
def test_user_rejects_invalid_email(email: str) -> None:
    with pytest.raises(ValidationError):
        User(name="Ada", email=email)


# Open-closed


def test_calculate_area_scenario() -> None:
    total = calculate_area(Rectangle(width=3, height=4), Circle(radius=2))

    assert total == pytest.approx(12 + 4 * math.pi)
    assert total == calculate_area(Circle(radius=2), Rectangle(width=3, height=4))


def test_negative_dimensions_are_rejected() -> None:
    with pytest.raises(ValueError):
        Rectangle(width=-1, height=2)
    with pytest.raises(ValueError):
        Circle(radius=-0.5)
    with pytest.raises(ValueError):
        Rectangle(width=float("nan"), height=1)
    with pytest.raises(ValueError):
        Circle(radius=float("inf"))


def test_calculate_area_rejects_non_shapes() -> None:
    with pytest.raises(MissingCapability):
        calculate_area(Rectangle(width=1, height=1), Sparrow())


# Liskov substitution


def test_birds_only_do_what_they_can() -> None:
    assert let_fly([Sparrow()]) == ["Sparrow flying"]
    assert let_walk([Ostrich()]) == ["Ostrich walking"]

    with pytest.raises(MissingCapability) as exc_info:
        let_fly([Sparrow(), Ostrich()])
    assert exc_info.value.missing == ("fly",)


# Interface segregation


def test_robots_and_humans_share_a_shift() -> None:
    assert run_shift([Robot(), Human()]) == ["Robot working", "Human working"]


def test_robot_is_not_a_living_worker() -> None:
    assert run_day([Human()]) == [("Human working", "Human eating", "Human sleeping")]

    with pytest.raises(MissingCapability) as exc_info:
        run_day([Robot()])
    assert exc_info.value.missing == ("eat", "sleep")
    assert Robot not in default_registry.variants_of(LIVING_WORKER)


# Dependency inversion


@pytest.mark.parametrize(("db", "backend"), [(MySQL(), "mysql"), (PostgreSQL(), "postgresql")])
def test_business_logic_works_with_any_database(db: object, backend: str) -> None:
    report = BusinessLogic(db).process_data()

    assert report.backend == backend
    assert report.row_count == 0


def test_business_logic_with_mock_database() -> None:
    db = Mock()
    db.query.return_value = QueryResult(
        backend="fake", sql=BusinessLogic.USERS_QUERY, rows=[{"id": 1}, {"id": 2}]
    )

    report = BusinessLogic(db).process_data()

    db.query.assert_called_once_with("SELECT * FROM users")
    assert report.row_count == 2


def test_business_logic_rejects_non_database() -> None:
    with pytest.raises(MissingCapability) as exc_info:
        BusinessLogic(Human())
    assert exc_info.value.contract == DATABASE.name


def test_database_defaults() -> None:
    assert MySQL().port == 3306
    assert PostgreSQL().port == 5432


# Catalogue


def test_catalogue_lookup_by_slug_and_acronym() -> None:
    assert get_sample("OCP") is SAMPLES["open-closed"]
    assert get_sample("dependency-inversion").acronym == "dip"

    with pytest.raises(KeyError):
        get_sample("solid")


@pytest.mark.parametrize("slug", sorted(SAMPLES))
def test_every_sample_runs(slug: str) -> None:
    lines = SAMPLES[slug].run()

    assert lines
    assert all(isinstance(line, str) and line for line in lines)


def test_sample_variants_satisfy_their_contracts() -> None:
    assert default_registry.verify(strict=True) == []
