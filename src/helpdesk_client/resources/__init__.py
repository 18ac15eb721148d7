from helpdesk_client.resources.users import UsersCollection, UsersMixin

__all__ = [
    "UsersCollection",
    "UsersMixin",
]
