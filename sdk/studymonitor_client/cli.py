# SPDX-License-Identifier: Apache-2.0
"""Click CLI entry point. Install the package, then: studymonitor --help."""
import click

from .client import StudyMonitorClient
from .exceptions import APIError


def _print_summary(payload: dict) -> None:
    study = payload.get("study", {})
    summary = payload.get("summary", {})
    filters = payload.get("filters", {})
    click.echo(f"{study.get('studyCode', '')} {study.get('title', '')}")
    click.echo(f"Window: {filters.get('from')} .. {filters.get('to')} (participant: {filters.get('participantId')})")
    click.echo(
        f"Average rating: {summary.get('averageRating')}  "
        f"Completion: {summary.get('completionPercentage')}%  "
        f"Submissions: {summary.get('submissionsCount')}  "
        f"Participants: {summary.get('completedParticipants')}/{summary.get('activeParticipants')}"
    )
    for artifact in payload.get("charts", {}).get("artifactAverages", []):
        click.echo(f"  {artifact['name']}: {artifact['value']} ({artifact['submissions']} ratings)")


@click.group()
@click.option("--api-url", default="http://localhost:8000", envvar="STUDYMONITOR_API_URL", help="API base URL")
@click.pass_context
def cli(ctx, api_url):
    """Study Monitor: research-study analytics from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["client"] = StudyMonitorClient(api_url)


@cli.command()
@click.argument("study_id")
@click.option("--from", "from_date", default=None, help="Window start (ISO date)")
@click.option("--to", "to_date", default=None, help="Window end (ISO date)")
@click.option("--participant", "participant_id", default=None, help="Participant id or 'all'")
@click.pass_context
def summary(ctx, study_id, from_date, to_date, participant_id):
    """Print the analytics summary of a study."""
    try:
        payload = ctx.obj["client"].get_study_analytics(study_id, from_date, to_date, participant_id)
    except APIError as e:
        raise click.ClickException(e.message)
    _print_summary(payload)


@cli.command()
@click.argument("study_id")
@click.option("--from", "from_date", default=None, help="Window start (ISO date)")
@click.option("--to", "to_date", default=None, help="Window end (ISO date)")
@click.option("--participant", "participant_id", default=None, help="Participant id or 'all'")
@click.option("--count", default=None, type=int, help="Stop after this many polls")
@click.pass_context
def watch(ctx, study_id, from_date, to_date, participant_id, count):
    """Poll a study at the server-advertised refresh interval."""
    try:
        for payload in ctx.obj["client"].watch_study_analytics(
            study_id, from_date, to_date, participant_id, iterations=count
        ):
            _print_summary(payload)
            click.echo(f"Last updated: {payload.get('summary', {}).get('lastUpdated')}")
    except APIError as e:
        raise click.ClickException(e.message)


def main():
    """Entry point for console_scripts."""
    cli(obj={})


if __name__ == "__main__":
    main()
