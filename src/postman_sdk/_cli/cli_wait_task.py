from typing import Optional

import click

from ._utils._common import SDK_ERRORS, create_client, echo_json, fail


@click.command(name="wait-task")
@click.option("--spec-id", default=None, help="The spec that owns the task")
@click.option("--collection-uid", default=None, help="The collection that owns the task")
@click.option("--task-id", required=True, help="The task ID returned by the API")
@click.option(
    "--poll-interval",
    type=float,
    default=5.0,
    show_default=True,
    help="Seconds between two status checks",
)
@click.option(
    "--timeout",
    type=float,
    default=60.0,
    show_default=True,
    help="Seconds to wait before giving up",
)
def wait_task(
    spec_id: Optional[str],
    collection_uid: Optional[str],
    task_id: str,
    poll_interval: float,
    timeout: float,
) -> None:
    """Wait for a generation or synchronization task to complete.

    Exactly one of --spec-id and --collection-uid must be given.
    """
    if (spec_id is None) == (collection_uid is None):
        raise click.UsageError("Pass exactly one of --spec-id or --collection-uid")

    client = create_client()

    try:
        if spec_id is not None:
            response = client.specs.wait_for_task(
                spec_id, task_id, poll_interval=poll_interval, timeout=timeout
            )
        else:
            response = client.collections.wait_for_task(
                collection_uid, task_id, poll_interval=poll_interval, timeout=timeout
            )
    except SDK_ERRORS as e:
        raise fail(e) from e

    click.echo(f"Task {task_id} completed")
    echo_json(response)
