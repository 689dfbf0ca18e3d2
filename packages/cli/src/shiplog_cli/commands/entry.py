"""entry command — write a changelog entry for a merged pull request."""

from __future__ import annotations

import click
from rich.console import Console

from shiplog_cli.outputs import set_output
from shiplog_core.errors import DetailFetchError, ShiplogError
from shiplog_core.gh.event import load_event, snapshot_from_event
from shiplog_core.gh.pull_request import FETCH_ERRORS, get_pull, get_repo, snapshot_from_pull
from shiplog_core.generator import generate_entry, skip_reason

console = Console()


def _skip(message: str) -> None:
    console.print(f"[yellow]{message} Skipping.[/yellow]")
    set_output("updated", "false")


@click.command("entry")
@click.option(
    "--repo",
    envvar="GITHUB_REPOSITORY",
    required=True,
    help="GitHub repository in owner/name format. Defaults to $GITHUB_REPOSITORY.",
)
@click.option(
    "--pr",
    "pr_number",
    type=int,
    default=None,
    help="Pull request number. Omit to read the pull request from the Actions event.",
)
@click.option(
    "--event",
    "event_path",
    envvar="GITHUB_EVENT_PATH",
    default=None,
    help="Path to the event payload JSON. Defaults to $GITHUB_EVENT_PATH.",
)
@click.option("--provider", default=None, help="'openai', 'openrouter', or a custom base URL. Overrides config file.")
@click.option("--model", default=None, help="Model name. Overrides config file.")
@click.option("--changelog-path", default=None, help="Changelog file to update. Overrides config file.")
@click.option("--include-labels", default=None, help="Comma-separated labels; only PRs with one of them get an entry.")
@click.option("--exclude-labels", default=None, help="Comma-separated labels; PRs with any of them are skipped.")
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the entry without updating the changelog.",
)
@click.pass_context
def entry_cmd(
    ctx,
    repo: str,
    pr_number: int | None,
    event_path: str | None,
    provider: str | None,
    model: str | None,
    changelog_path: str | None,
    include_labels: str | None,
    exclude_labels: str | None,
    shadow: bool,
):
    """Generate a changelog entry for a merged pull request.

    Collects the PR's commits, approving reviewers and changed files, asks
    the configured model for a user-facing summary, and inserts it at the
    top of the changelog.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub token (GH_TOKEN or the gh CLI session also work)
      SHIPLOG_API_KEY      API key for the model provider (OPENAI_API_KEY also works)
    """
    from shiplog_core.config import load_config, resolve_ai_config
    from shiplog_cli.auth import resolve_github_token

    config_path = ctx.obj.get("config_path", ".shiplog.yml") if ctx.obj else ".shiplog.yml"

    try:
        config = load_config(
            config_path,
            cli_overrides={
                "provider": provider,
                "model": model,
                "changelog_path": changelog_path,
                "include_labels": include_labels,
                "exclude_labels": exclude_labels,
            },
        )

        token = resolve_github_token()
        if not token:
            raise click.UsageError(
                "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
                "Create a token at https://github.com/settings/tokens"
            )
        if pr_number is None and not event_path:
            raise click.UsageError("Pass --pr or run inside GitHub Actions so GITHUB_EVENT_PATH is set.")

        ai_config = resolve_ai_config(config["provider"], config["model"], config.get("api_key"))

        try:
            this_repo = get_repo(repo, token=token)
            if pr_number is not None:
                snapshot = snapshot_from_pull(get_pull(this_repo, pr_number))
            else:
                payload = load_event(event_path)
                if not payload.get("pull_request"):
                    _skip("No pull request found in the event payload.")
                    return
                snapshot = snapshot_from_event(payload)
        except FETCH_ERRORS as e:
            raise DetailFetchError(f"Could not load {repo} from GitHub: {e}") from e

        reason = skip_reason(snapshot, config["include_labels"], config["exclude_labels"])
        if reason is not None:
            _skip(f"PR #{snapshot.number}: {reason}.")
            return

        entry = generate_entry(
            snapshot,
            this_repo,
            ai_config,
            changelog_path=config["changelog_path"],
            write=not shadow,
        )
    except ShiplogError as e:
        set_output("updated", "false")
        raise click.ClickException(str(e)) from e

    if shadow:
        console.print(f"\n[bold]Shadow entry for PR #{snapshot.number} (changelog not updated)[/bold]\n")
        console.print(entry.text, markup=False, highlight=False)
        set_output("updated", "false")
        return

    set_output("entry", entry.text)
    set_output("updated", "true")
    console.print(f"[green]Changelog entry for PR #{snapshot.number} written to {config['changelog_path']}.[/green]")
