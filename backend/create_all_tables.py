"""Create all tables for a local development database and seed the role rows"""
import argparse
import sys

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from cms_admin.core.auth import DatabaseAuthProvider
from cms_admin.core.database import Base, get_engine, get_session_local
from cms_admin.models import Profile, Role, RoleValue

ROLE_ORDER = [RoleValue.ADMIN, RoleValue.AUTHOR, RoleValue.READER, RoleValue.BANNED]


def seed_roles(db) -> None:
    existing = {role.value for role in db.query(Role).all()}
    for position, value in enumerate(ROLE_ORDER):
        if value.value not in existing:
            db.add(Role(value=value.value, label=value.value.capitalize(), order=position))
    db.commit()


def create_admin(email: str, password: str) -> None:
    provider = DatabaseAuthProvider()
    user = provider.create_user(email, password)

    db = get_session_local()()
    try:
        admin_role = db.query(Role).filter(Role.value == RoleValue.ADMIN.value).one()
        db.add(Profile(id=user.id, email=email, username=email.split("@")[0], role_id=admin_role.id))
        db.commit()
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--admin-email", help="Also create an admin account with this email")
    parser.add_argument("--admin-password", help="Password for --admin-email")
    args = parser.parse_args(argv)

    engine = get_engine()
    print("Creating all tables from models...")
    try:
        Base.metadata.create_all(bind=engine)

        db = get_session_local()()
        try:
            seed_roles(db)
        finally:
            db.close()

        if args.admin_email:
            if not args.admin_password:
                parser.error("--admin-password is required with --admin-email")
            create_admin(args.admin_email, args.admin_password)
            print(f"Created admin account {args.admin_email}")
    except (SQLAlchemyError, ValueError) as e:
        print(f"Error creating tables: {e}")
        return 1

    tables = inspect(engine).get_table_names()
    print(f"\n{len(tables)} tables:")
    for table in sorted(tables):
        print(f"  {table}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
