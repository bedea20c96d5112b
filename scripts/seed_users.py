#!/usr/bin/env python3
"""
Seed script to create initial user accounts.

Usage:
    # Set environment variables for passwords
    export SEED_PASSWORD_ADMIN="your_password"
    export SEED_PASSWORD_EDITOR="your_password"
    export SEED_PASSWORD_VIEWER="your_password"

    # Run the script
    python scripts/seed_users.py
"""
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.database import SessionLocal, init_db
from app.models import User
from app.auth import hash_password


# User definitions
USERS = [
    {
        "full_name": "Administrator",
        "email": os.getenv("SEED_EMAIL_ADMIN", "admin@integram.local"),
        "role": "admin",
        "password_env": "SEED_PASSWORD_ADMIN",
    },
    {
        "full_name": "Editor",
        "email": os.getenv("SEED_EMAIL_EDITOR", "editor@integram.local"),
        "role": "editor",
        "password_env": "SEED_PASSWORD_EDITOR",
    },
    {
        "full_name": "Viewer",
        "email": os.getenv("SEED_EMAIL_VIEWER", "viewer@integram.local"),
        "role": "viewer",
        "password_env": "SEED_PASSWORD_VIEWER",
    },
]


def seed_users():
    """Create user accounts from environment variables."""
    init_db()
    db = SessionLocal()
    created = []
    skipped = []
    errors = []

    try:
        for user_def in USERS:
            email = user_def["email"]

            existing = db.query(User).filter(User.email == email).first()
            if existing:
                skipped.append(f"{user_def['full_name']} ({email}) - already exists")
                continue

            password = os.getenv(user_def["password_env"])
            if not password:
                # Optional roles are simply left out
                skipped.append(f"{user_def['full_name']} - no {user_def['password_env']} set")
                continue

            user = User(
                full_name=user_def["full_name"],
                email=email,
                role=user_def["role"],
                password_hash=hash_password(password),
                is_active=True,
            )
            db.add(user)
            created.append(f"{user_def['full_name']} ({email}) - {user_def['role']}")

        db.commit()

    except Exception as e:
        db.rollback()
        errors.append(str(e))
    finally:
        db.close()

    # Print summary
    print("\n=== User Seed Summary ===\n")

    if created:
        print("Created:")
        for item in created:
            print(f"  + {item}")

    if skipped:
        print("\nSkipped:")
        for item in skipped:
            print(f"  - {item}")

    if errors:
        print("\nErrors:")
        for item in errors:
            print(f"  ! {item}")

    print(f"\nTotal: {len(created)} created, {len(skipped)} skipped, {len(errors)} errors")

    if errors:
        sys.exit(1)


if __name__ == "__main__":
    seed_users()
