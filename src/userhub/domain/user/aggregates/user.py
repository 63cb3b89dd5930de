from datetime import datetime
from typing import Optional

from userhub.domain.user.exceptions import InvalidEmailError, PasswordTooShortError

MIN_PASSWORD_LENGTH = 8


class User:
    """
    User aggregate root.

    An account identified by a storage-assigned integer id. A freshly
    created user has no id and no timestamps until the repository persists
    it. The password is kept as given; hashing is not part of this domain.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: str,
        name: str,
        password: str,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._email = email
        self._name = name
        self._password = password
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def password(self) -> str:
        return self._password

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def validate(self) -> None:
        """
        Check the business rules for a user.

        Raises
        ------
        InvalidEmailError
            If the email is empty
        PasswordTooShortError
            If the password is shorter than 8 characters
        """
        if not self._email:
            raise InvalidEmailError()
        if len(self._password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)

    def mark_persisted(
        self,
        id: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        # The id never changes once storage has assigned it.
        if self._id is not None and self._id != id:
            msg = f"User id is immutable (has {self._id}, got {id})"
            raise ValueError(msg)
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at

    def touch(self, now: datetime) -> None:
        self._updated_at = now

    @classmethod
    def create(cls, email: str, name: str, password: str) -> "User":
        return cls(email=email, name=name, password=password)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        email: str,
        name: str,
        password: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password=password,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
