# flake8: noqa
# scripts/create_admin.py

"""
관리자 계정을 관리하는 명령줄 도구입니다.

    python -m scripts.create_admin create --email admin@example.com --name Admin
    python -m scripts.create_admin change-password --email admin@example.com
"""

import asyncio
import typer
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.database import AsyncSessionLocal, engine
from shop_admin.core.responses import ApiException
from shop_admin.domains.usr import crud as usr_crud
from shop_admin.domains.usr import schemas as usr_schemas
from shop_admin.domains.usr.models import UserRole

cli = typer.Typer(help="Shop Admin 관리자 계정 도구")


async def create_admin_user(db: AsyncSession, user_in: usr_schemas.UserCreate) -> bool:
    """
    데이터베이스에 관리자 사용자를 생성합니다. 이메일이 이미 있으면 False를 반환합니다.
    """
    try:
        await usr_crud.user.create(db, obj_in=user_in)
    except ApiException as e:
        typer.echo(f"오류: {e.detail} ({user_in.email})")
        return False
    typer.echo(f"관리자 계정이 성공적으로 생성되었습니다: {user_in.email}")
    return True


async def change_user_password(db: AsyncSession, email: str, password: str) -> bool:
    db_user = await usr_crud.user.get_by_email(db, email=email)
    if db_user is None:
        typer.echo(f"오류: 존재하지 않는 이메일입니다: {email}")
        return False
    await usr_crud.user.update(db, db_obj=db_user, obj_in=usr_schemas.UserUpdate(password=password))
    typer.echo(f"비밀번호가 변경되었습니다: {email}")
    return True


def _run(coro_factory) -> bool:
    async def runner():
        try:
            async with AsyncSessionLocal() as db:
                return await coro_factory(db)
        finally:
            await engine.dispose()

    return asyncio.run(runner())


@cli.command("create")
def create(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="생성할 관리자 계정의 이메일 주소이자 로그인 ID입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="생성할 관리자 계정의 비밀번호입니다. (최소 8자 이상)"
    ),
    name: str = typer.Option(
        "Admin", '--name', '-n',
        prompt="관리자 이름을 입력하세요",
        help="관리자의 이름입니다."
    ),
):
    """
    새로운 관리자(ADMIN) 계정을 생성합니다.
    """
    try:
        user_data = usr_schemas.UserCreate(email=email, name=name, password=password, role=UserRole.ADMIN)
    except ValidationError as e:
        typer.echo(f"오류: 입력값이 올바르지 않습니다.\n{e}")
        raise typer.Exit(code=1)

    typer.echo("관리자 계정 생성을 시작합니다...")
    if not _run(lambda db: create_admin_user(db, user_data)):
        raise typer.Exit(code=1)


@cli.command("change-password")
def change_password(
    email: str = typer.Option(..., '--email', '-e', prompt="계정 이메일을 입력하세요"),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="새 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
    ),
):
    """
    기존 계정의 비밀번호를 변경합니다.
    """
    if len(password) < 8:
        typer.echo("오류: 비밀번호는 최소 8자 이상이어야 합니다.")
        raise typer.Abort()

    if not _run(lambda db: change_user_password(db, email, password)):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
