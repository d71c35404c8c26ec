#!/usr/bin/env python3
"""Create an API user (or rotate its token) and print the bearer token"""
import argparse
import sys

from database import SessionLocal
from exceptions import ValidationError
from init_db import init_database
from services.auth_service import AuthService


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("username", help="Username of the account")
    parser.add_argument("--rotate", action="store_true", help="Issue a new token for an existing user")
    args = parser.parse_args(argv)

    init_database()

    db = SessionLocal()
    try:
        service = AuthService(db)
        if args.rotate:
            token = service.rotate_token(args.username)
            print(f"✓ New token for {args.username}")
        else:
            user, token = service.create_user(args.username)
            print(f"✓ Created user {user.username} ({user.id})")
    except ValidationError as e:
        for messages in e.invalid_fields.values():
            for message in messages:
                print(f"✗ {message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"\nAPI token (shown once): {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
