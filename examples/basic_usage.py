"""
Basic usage examples for the helpdesk client.

This example demonstrates:
- Client configuration from the environment
- Listing, searching and fetching users
- Creating, updating and deleting a user
- Error handling

Set HELPDESK_URL, HELPDESK_EMAIL and HELPDESK_TOKEN before running.
"""

import logging

from helpdesk_client import ClientSettings, HelpdeskClient, HelpdeskClientError


def main():
    """Main example function."""
    logging.basicConfig(level=logging.DEBUG)

    with HelpdeskClient.from_settings(ClientSettings.from_env()) as client:
        try:
            # Who am I
            me = client.users().me().fetch()
            print(f"🔐 Authenticated as {me['user']['name']}")
            print()

            # List users
            print("📋 Listing users...")
            for user in client.users().per_page(5):
                print(f"  • {user['name']} (ID: {user['id']})")
            print()

            # Create a user
            print("➕ Creating new user...")
            created = client.users().create({"name": "Mr. Miyagi", "email": "miyagi@example.com"})
            user_id = created["user"]["id"]
            print(f"✅ Created user {user_id}")
            print()

            # Search by name
            print("🔍 Searching for 'Miyagi'...")
            matches = list(client.users("Miyagi", {"role": "end-user"}))
            print(f"✅ Found {len(matches)} users")
            print()

            # Update with the configurator form
            print(f"✏️  Updating user {user_id}...")

            def configure(user):
                user["email"] = "hongkong@phooey.com"

            client.users(user_id).update(configure)

            for identity in client.users(user_id).identities():
                print(f"  • {identity['type']}: {identity['value']}")
            print()

            # Delete the user
            print(f"🗑️  Deleting user {user_id}...")
            client.users(user_id).delete()
            print("✅ Deleted user")

        except HelpdeskClientError as e:
            print(f"❌ API Error: {e}")
            print(f"   Status: {e.status_code}")
            print(f"   Details: {e.details}")


if __name__ == "__main__":
    main()
