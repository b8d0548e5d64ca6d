"""
Random test data backed by Faker.

All functions share one module-level generator so ``seed`` makes a whole run
reproducible.
"""

from faker import Faker
from pydantic import BaseModel, ConfigDict, field_validator

_faker = Faker()


def seed(value: int) -> None:
    """Seed the shared generator."""
    Faker.seed(value)
    _faker.seed_instance(value)


def random_email() -> str:
    return _faker.email()


def random_password() -> str:
    return _faker.password(length=12, special_chars=True, digits=True, upper_case=True)


def random_first_name() -> str:
    return _faker.first_name()


def random_last_name() -> str:
    return _faker.last_name()


def random_full_name() -> str:
    return _faker.name()


def random_phone_number() -> str:
    return _faker.phone_number()


def random_cell_number() -> str:
    """Ten digits, the format the practice form's mobile field accepts."""
    return _faker.numerify("##########")


def random_address() -> str:
    return _faker.street_address()


def random_city() -> str:
    return _faker.city()


def random_state() -> str:
    return _faker.state()


def random_zip_code() -> str:
    return _faker.postcode()


def random_company() -> str:
    return _faker.company()


def random_job_title() -> str:
    return _faker.job()


class PersonData(BaseModel):
    """One generated person, shared read-only by the tests of a class."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str
    password: str
    phone_number: str
    cell_number: str
    address: str
    city: str
    state: str
    zip_code: str
    company: str
    job_title: str

    @field_validator("*")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def generate(cls) -> "PersonData":
        return cls(
            first_name=random_first_name(),
            last_name=random_last_name(),
            email=random_email(),
            password=random_password(),
            phone_number=random_phone_number(),
            cell_number=random_cell_number(),
            address=random_address(),
            city=random_city(),
            state=random_state(),
            zip_code=random_zip_code(),
            company=random_company(),
            job_title=random_job_title(),
        )
