from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

FieldTypeT = TypeVar("FieldTypeT")


@dataclass(frozen=True)
class Pizza:
    ingredients: tuple[str, ...]
    size: int


@dataclass(frozen=True)
class UserRegistration:
    email: str
    password: str
    password_confirmation: str


class UserRegistrationError(Enum):
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    PASSWORDS_DONT_MATCH = "passwords_dont_match"


class Reason(Enum):
    INVALID_FORMAT = "invalid_format"
    REQUIRED = "required"
    NEEDS_MATCH = "needs_match"


@dataclass(frozen=True)
class FormError(Generic[FieldTypeT]):
    reason: Reason
    field: FieldTypeT

    @classmethod
    def required(cls, form_field: FieldTypeT) -> "FormError[FieldTypeT]":
        return cls(reason=Reason.REQUIRED, field=form_field)

    @classmethod
    def bad_format(cls, form_field: FieldTypeT) -> "FormError[FieldTypeT]":
        return cls(reason=Reason.INVALID_FORMAT, field=form_field)


class LoginField(Enum):
    EMAIL = "email"
    PASSWORD = "password"
    PASSWORD_CONFIRMATION = "password_confirmation"


@dataclass(frozen=True)
class FormField(Generic[FieldTypeT]):
    field: FieldTypeT
    text: str = ""
    visited: bool = False


@dataclass(frozen=True)
class LoginForm:
    email_field: FormField[LoginField]
    password_field: FormField[LoginField]
    password_confirmation_field: FormField[LoginField]


@dataclass(frozen=True)
class Address:
    street: str
    zip_code: str
    city: Optional[str] = None


@dataclass(frozen=True)
class Customer:
    name: str
    age: int
    address: Address
    nickname: Optional[str] = None
    tags: dict[str, str] = field(default_factory=dict)
