from __future__ import annotations

import argparse

from fridge import crud
from fridge.db import session_scope


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a user (or rotate its key) and print the API key.")
    parser.add_argument("email")
    parser.add_argument("--name", default=None, help="Display name")
    args = parser.parse_args()

    with session_scope() as db:
        user = crud.get_or_create_user_by_email(db, args.email, display_name=args.name)
        user_id = user.id
        raw_key = crud.rotate_user_api_key(db, user_id)

    print(f"User {user_id} <{args.email}>")
    print(f"API key (shown once): {raw_key}")


if __name__ == "__main__":
    main()
