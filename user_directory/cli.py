"""Command line demonstration of the user directory client."""

from typing import Optional
import typer
from rich.console import Console

from user_directory.config import ClientConfig, UserDirectoryConfigError
from user_directory.models.user import User
from user_directory.services.users import UserService

app = typer.Typer(
    name="user-directory",
    help="Query and create users in a remote user directory",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)


def _load_config(base_url: Optional[str], verbose: bool) -> ClientConfig:
    """Merge command line overrides on top of the environment configuration."""
    config = ClientConfig.from_env()
    overrides = {}
    if base_url:
        overrides["base_url"] = base_url
    if verbose:
        overrides["verbose"] = True
    if overrides:
        config = ClientConfig.create(**{**config.model_dump(), **overrides})
    return config


def _service(ctx: typer.Context) -> UserService:
    return UserService(config=ctx.obj["config"])


def _print_user(user: Optional[User]) -> None:
    console.print_json(data=user.to_dict() if user else None)


def _print_section(title: str) -> None:
    console.print(f"\n[bold blue]{title}[/bold blue]")


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="API base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """User directory client."""
    try:
        config = _load_config(base_url, verbose)
    except UserDirectoryConfigError as e:
        err_console.print(f"[red]❌ Configuration error: {e}[/red]")
        raise typer.Exit(1)

    ctx.obj = {"config": config}


@app.command("list")
def list_users(
    ctx: typer.Context,
    page: str = typer.Option("1", "--page", "-p", help="Page number"),
    per_page: str = typer.Option("5", "--per-page", "-n", help="Users per page (1-10)")
):
    """List a page of users."""
    with _service(ctx) as service:
        result = service.list_users(page, per_page)

    if not result.ok:
        err_console.print(f"[red]{UserService.ERROR_MESSAGE}: {result.error.message}[/red]")
        raise typer.Exit(1)

    console.print_json(data=[user.to_dict() for user in result.users])


@app.command("get")
def get_user(ctx: typer.Context, user_id: int = typer.Argument(..., help="User ID")):
    """Retrieve a user by ID."""
    with _service(ctx) as service:
        _print_user(service.get_user_by_id(user_id))


@app.command("create")
def create_user(
    ctx: typer.Context,
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    email: str = typer.Option("", "--email", "-e", help="Email address"),
    job: str = typer.Option("", "--job", "-j", help="Job title")
):
    """Create a user."""
    with _service(ctx) as service:
        _print_user(service.create_user(first_name, last_name, email=email, job=job))


@app.command("demo")
def demo(ctx: typer.Context):
    """Run the example sequence of listing, creating and retrieving users."""
    with _service(ctx) as service:
        _print_section("Paginated users:")
        result = service.list_users()
        if result.ok:
            console.print_json(data=[user.to_dict() for user in result.users])
        else:
            console.print(f"[red]{UserService.ERROR_MESSAGE}[/red]")

        _print_section("Creating a user (names, email and job):")
        _print_user(service.create_user("Tom", "Smith", "tom.smith@email.com", "Painter"))

        _print_section("Creating a user (names and job only):")
        _print_user(service.create_user("Tom", "Smith", job="Painter"))

        _print_section("Retrieve a user by ID:")
        _print_user(service.get_user_by_id(5))


if __name__ == "__main__":
    app()
