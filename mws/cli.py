"""Command line interface for managing configuration profiles."""

from __future__ import annotations

import sys
from typing import Protocol, Sequence

import click

from mws.profile import Profile
from mws.repository import ProfileYAMLRepo, RepositoryError

DEFAULT_DIR = "./profiles"


class ProfileRepo(Protocol):
    """Storage that the commands work against."""

    def create(self, profile: Profile) -> None: ...

    def list(self) -> list[Profile]: ...

    def get(self, name: str) -> Profile: ...

    def delete(self, name: str) -> None: ...


def format_profile(profile: Profile) -> str:
    """Render a profile the way the commands print it."""
    return f"name: {profile.name}\n\tuser: {profile.user}\n\tproject: {profile.project}\n"


def _repo(ctx: click.Context) -> ProfileRepo:
    return ctx.find_root().obj


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(str(exc))


@click.group(
    help="mws - это утилита командной строки для создания и управления\n"
    "профилями конфигурации в виде YAML-файлов."
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """CLI для управления профилями конфигурации."""
    if ctx.obj is None:
        try:
            ctx.obj = ProfileYAMLRepo(DEFAULT_DIR)
        except RepositoryError as exc:
            raise _fail(exc) from exc


@cli.group(
    invoke_without_command=True,
    help="Позволяет создавать, просматривать, перечислять и удалять профили конфигурации.",
    short_help="Группа команд для работы с профилями",
)
@click.pass_context
def profile(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo("Необходимо указать подкоманду: create, get, list, delete.")
        click.echo("Используйте 'mws profile --help' для просмотра списка команд.")


@profile.command(
    "create",
    help="Создает YAML-файл с указанным именем (--name).\n"
    "Внутри файла сохраняются поля user и project на основе соответствующих флагов.",
    short_help="Создает новый профиль конфигурации.",
)
@click.option("--name", required=True, help="название профиля (имя файла без расширения)")
@click.option("--user", required=True, help="имя пользователя для профиля")
@click.option("--project", required=True, help="название проекта для профиля")
@click.pass_context
def create_command(ctx: click.Context, name: str, user: str, project: str) -> None:
    try:
        _repo(ctx).create(Profile(name=name, user=user, project=project))
    except (RepositoryError, OSError) as exc:
        raise _fail(exc) from exc


@profile.command(
    "get",
    help="Находит профиль по имени, указанному в флаге --name,\n"
    "и выводит содержимое соответствующего YAML-файла в консоль.",
    short_help="Выводит информацию о конкретном профиле.",
)
@click.option("--name", required=True, help="название профиля")
@click.pass_context
def get_command(ctx: click.Context, name: str) -> None:
    try:
        found = _repo(ctx).get(name)
    except (RepositoryError, OSError) as exc:
        raise _fail(exc) from exc
    click.echo(format_profile(found), nl=False)


@profile.command(
    "list",
    help="Сканирует директорию профилей на наличие файлов с расширением .yaml "
    "и выводит список доступных профилей.",
    short_help="Выводит список всех существующих профилей.",
)
@click.pass_context
def list_command(ctx: click.Context) -> None:
    try:
        profiles = _repo(ctx).list()
    except (RepositoryError, OSError) as exc:
        raise _fail(exc) from exc
    for item in profiles:
        click.echo(format_profile(item), nl=False)


@profile.command(
    "delete",
    help="Находит и удаляет YAML-файл профиля по имени, указанному в флаге --name.",
    short_help="Удаляет указанный профиль.",
)
@click.option("--name", required=True, help="название профиля для удаления")
@click.pass_context
def delete_command(ctx: click.Context, name: str) -> None:
    try:
        _repo(ctx).delete(name)
    except (RepositoryError, OSError) as exc:
        raise _fail(exc) from exc


def main(argv: Sequence[str] | None = None, repo: ProfileRepo | None = None) -> int:
    """Run the command line and return the exit status."""
    if repo is None:
        try:
            repo = ProfileYAMLRepo(DEFAULT_DIR)
        except RepositoryError as exc:
            click.echo(str(exc), err=True)
            return 1
    try:
        result = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="mws",
            obj=repo,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())