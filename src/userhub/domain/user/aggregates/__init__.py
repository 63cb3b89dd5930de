from userhub.domain.user.aggregates.user import MIN_PASSWORD_LENGTH, User

__all__ = ["MIN_PASSWORD_LENGTH", "User"]
