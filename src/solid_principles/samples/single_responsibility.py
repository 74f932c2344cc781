"""Single responsibility: one reason to change per class.

`User` only holds data. Persisting users belongs to `UserRepository` and
welcome emails belong to `EmailService`, so switching the storage backend or
the email provider touches exactly one class.

Both collaborators are in-memory stand-ins; nothing here performs real I/O.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from solid_principles.registry import OperationSignature, define_contract, implement, implements

logger = logging.getLogger(__name__)


class User(BaseModel):
    """User data. No behaviour beyond validation."""

    name: str = Field(min_length=1)
    email: str

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        local, sep, domain = value.strip().partition("@")
        if not sep or not local or "." not in domain:
            raise ValueError(f"Not an email address: {value!r}")
        return value.strip().lower()


class EmailMessage(BaseModel):
    sender: str
    to: str
    subject: str
    body: str


USER_STORE = define_contract(
    "UserStore",
    [OperationSignature("save", ("user",), returns="None")],
    description="Persists users",
)

WELCOME_MAILER = define_contract(
    "WelcomeMailer",
    [OperationSignature("send_welcome_email", ("user",), returns="EmailMessage")],
    description="Sends the welcome email to a new user",
)


@implements(USER_STORE)
class UserRepository:
    """In-memory user store keyed by email address."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def save(self, user: User) -> None:
        self._users[user.email] = user
        logger.info("User saved", extra={"email": user.email})

    def get(self, email: str) -> User | None:
        return self._users.get(email.strip().lower())

    def all(self) -> list[User]:
        return list(self._users.values())


@implements(WELCOME_MAILER)
class EmailService:
    """Renders welcome emails into an outbox instead of sending them."""

    def __init__(self, sender: str = "welcome@example.com") -> None:
        self.sender = sender
        self.outbox: list[EmailMessage] = []

    def send_welcome_email(self, user: User) -> EmailMessage:
        message = EmailMessage(
            sender=self.sender,
            to=user.email,
            subject=f"Welcome, {user.name}!",
            body=f"Hi {user.name}, thanks for signing up.",
        )
        self.outbox.append(message)
        logger.info("Welcome email queued", extra={"to": user.email})
        return message


def register_user(user: User, *, store: Any, mailer: Any) -> EmailMessage:
    """Save `user` and send the welcome email.

    `store` and `mailer` are only required to satisfy `UserStore` and
    `WelcomeMailer`; any implementation will do.
    """

    implement(USER_STORE, store).save(user)
    return implement(WELCOME_MAILER, mailer).send_welcome_email(user)


def run() -> list[str]:
    repository = UserRepository()
    mailer = EmailService()
    user = User(name="Ada", email="ada@example.com")

    message = register_user(user, store=repository, mailer=mailer)
    return [
        f"Saved {len(repository.all())} user(s) via {USER_STORE.name}",
        f"Sent {message.subject!r} to {message.to} via {WELCOME_MAILER.name}",
    ]
