"""Click-based CLI entry point for auth0kit."""

import sys

import click
from rich.markup import escape

from ..core.auth import doctor as run_doctor
from ..core.auth import get_management_client, request_management_token
from ..core.exceptions import Auth0KitError
from ..models.management import User
from ..models.paging import PaginationInfo
from ..utils.logging_utils import configure_default_logging
from ..utils.rich_utils import (
    build_table,
    get_console,
    install_rich_tracebacks,
    print_error,
    print_success,
    print_warning,
)

ENV_CHOICE = click.Choice(["dev", "prod"])
USER_COLUMNS = ("User ID", "Email", "Connection", "Blocked", "Last login")


def _user_rows(users: list[User]) -> list[tuple]:
    return [
        (
            user.user_id,
            user.email,
            user.connection,
            user.blocked,
            user.last_login.isoformat() if user.last_login else None,
        )
        for user in users
    ]


def _mask(token: str) -> str:
    if len(token) <= 16:
        return "*" * len(token)
    return f"{token[:8]}...{token[-4:]}"


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """auth0kit - Auth0 Authentication and Management API toolkit."""
    configure_default_logging()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("env", type=ENV_CHOICE, default="dev")
@click.option("--test-api", is_flag=True, help="Test Management API access")
def doctor(env: str, test_api: bool) -> None:
    """Test Auth0 credentials and API access."""
    result = run_doctor(env, test_api)
    if not result["success"]:
        print_error(result.get("error", result["details"]))
        sys.exit(1)
    if result.get("rate_limit"):
        get_console().print(f"[muted]{escape(result['rate_limit'])}[/muted]")
    if result.get("api_status") == "failed":
        print_warning(result["details"])
        sys.exit(1)
    print_success(result["details"])


@cli.command()
@click.argument("env", type=ENV_CHOICE, default="dev")
def token(env: str) -> None:
    """Obtain a Management API token and show it masked."""
    try:
        response = request_management_token(env)
    except Auth0KitError as e:
        print_error(str(e))
        sys.exit(1)

    console = get_console()
    console.print(f"[info]Token:[/info] {_mask(response.access_token or '')}")
    if response.expires_in is not None:
        console.print(f"[info]Expires in:[/info] {response.expires_in}s")
    if response.scope:
        console.print(f"[muted]Scope: {response.scope}[/muted]")


@cli.group()
def users() -> None:
    """Look up users through the Management API."""


@users.command("get")
@click.argument("env", type=ENV_CHOICE)
@click.argument("user_id")
def get_user(env: str, user_id: str) -> None:
    """Show a single user by id."""
    try:
        user = get_management_client(env).users.get(user_id)
    except Auth0KitError as e:
        print_error(str(e))
        sys.exit(1)

    get_console().print(
        build_table(f"User {user_id}", USER_COLUMNS, _user_rows([user]))
    )


@users.command("search")
@click.argument("env", type=ENV_CHOICE)
@click.argument("query")
@click.option("--per-page", type=click.IntRange(1, 100), default=25)
def search_users(env: str, query: str, per_page: int) -> None:
    """Search users with a Lucene query (e.g. ``email:"*@example.com"``)."""
    try:
        results = get_management_client(env).users.get_all(
            pagination=PaginationInfo(per_page=per_page), q=query
        )
    except Auth0KitError as e:
        print_error(str(e))
        sys.exit(1)

    title = f"Users matching {query}"
    if results.paging is not None:
        title += f" ({len(results)} of {results.paging.total})"
    get_console().print(build_table(title, USER_COLUMNS, _user_rows(results)))


@users.command("by-email")
@click.argument("env", type=ENV_CHOICE)
@click.argument("email")
def users_by_email(env: str, email: str) -> None:
    """Find users by exact email address."""
    try:
        results = get_management_client(env).users.get_users_by_email(email)
    except Auth0KitError as e:
        print_error(str(e))
        sys.exit(1)

    if not results:
        print_warning(f"No users found with email {email}")
        return
    get_console().print(
        build_table(f"Users with {email}", USER_COLUMNS, _user_rows(results))
    )


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        install_rich_tracebacks()
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation interrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
