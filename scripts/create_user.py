import argparse
import asyncio
import os
import sys

from pydantic import ValidationError

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.core.config import settings
from app.core.db import Database, init_models
from app.core.errors import ApiError
from app.modules.users.schemas import UserCreate, UserOut
from app.modules.users.service import UserService


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create a user that can log in to the API.")
    parser.add_argument("-f", "--first-name", required=True)
    parser.add_argument("-l", "--last-name")
    parser.add_argument("-u", "--username", required=True)
    parser.add_argument("-p", "--password", required=True)
    return parser.parse_args(argv)


async def create_user(db: Database, args) -> UserOut:
    payload = UserCreate(
        first_name=args.first_name,
        last_name=args.last_name,
        username=args.username,
        password=args.password,
    )
    async with db.session() as session:
        user = await UserService(session).create_user(payload)
        return UserOut.model_validate(user)


async def main(argv=None) -> int:
    args = parse_args(argv)
    db = Database(settings.DATABASE_DSN)
    try:
        await init_models(db, settings.DB_MANAGE)
        user = await create_user(db, args)
    except ApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    finally:
        await db.dispose()
    print(user.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
