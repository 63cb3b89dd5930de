"""Query layer. Read-only operations for retrieving data."""

from userhub.application.queries.user import GetUserQuery, ListUsersQuery

__all__ = ["GetUserQuery", "ListUsersQuery"]
