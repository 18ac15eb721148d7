"""
Users resource.

    client.users()                         - list users
    client.users().per_page(100)           - list users, 100 per page
    client.users(123)                      - the user with id=123
    client.users("Bob")                    - users whose name matches "Bob"
    client.users("Bob", {"role": "agent"}) - same, restricted to agents
    client.users().current()               - the authenticated user
    client.users(123).identities()         - emails, twitter handles, etc.
"""

from typing import Any

from helpdesk_client.collection import Collection


class UsersCollection(Collection):
    """Request builder for ``users`` endpoints."""

    resource = "users"
    resource_key = "user"

    def current(self) -> "UsersCollection":
        """Target the currently authenticated user (``users/current``)."""
        return self._append("current")

    me = current

    def identities(self) -> "UsersCollection":
        """Target a user's identities (``users/{id}/user_identities``)."""
        return self._append("user_identities")


class UsersMixin:
    """Adds the ``users`` accessor to a client exposing the do_* dispatch methods."""

    def users(self, *args: Any) -> UsersCollection:
        """
        Start a request against the users resource.

        Examples:
            client.users().create({"name": "Mr. Miyagi"})

            client.users().create(lambda user: user.update(name="Mr. Miyagi"))

            client.users(123).update({"email": "hongkong@phooey.com"})

            client.users(123).delete()
        """
        return UsersCollection(self, *args)

    # users are people
    people = users
