from __future__ import annotations

import argparse
import secrets
import string
import sys

from jobly.config import build_sqlalchemy_db_url, is_admin_email, settings
from jobly.database import Base, SessionLocal, engine
from jobly.models import User
from jobly.utils.password_hash import hash_password


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Create (or reset the password of) the account that manages companies and jobs. "
            "Write access is granted by listing the email in ADMIN_EMAILS."
        )
    )
    parser.add_argument("--email", required=True, help="Admin user email")
    parser.add_argument("--password", default=None, help="Admin user password (generated if omitted)")
    parser.add_argument("--name", default="Admin", help="Display name")
    parser.add_argument(
        "--update-password",
        action="store_true",
        help="If the user exists, overwrite their password",
    )
    args = parser.parse_args(argv)

    email = args.email.strip()
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)

    password = args.password or _generate_password()

    with SessionLocal() as db:
        user = db.query(User).filter(User.email == email).first()
        created = user is None
        if created:
            user = User(email=email, password=hash_password(password), name=args.name)
            db.add(user)
        elif args.update_password:
            user.password = hash_password(password)
        db.commit()
        user_id = user.id

    if created:
        print(f"created user id={user_id} email={email}")
    elif args.update_password:
        print(f"password updated for email={email}")
    else:
        print(f"user already exists email={email} (password not changed)")

    if (created or args.update_password) and args.password is None:
        print(f"generated password: {password}")

    if not is_admin_email(email):
        sys.stderr.write(
            "WARNING: this user cannot create, update or delete companies and jobs yet. Add it, e.g.\n"
            f"  ADMIN_EMAILS=[\"{email}\"]\n"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
