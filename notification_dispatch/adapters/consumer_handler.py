"""Consumer-handler for deferred notification jobs.

Flow for one record:
  record -> job payload parse -> manager.send -> commit/no-commit decision

Queued jobs carry no delivery guarantee: once a job parses, it is sent once
and committed whatever the provider reported, including sender exceptions.
Only unparseable records are rejected and left uncommitted.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from .payload import parse_job_payload

Record = Mapping[str, Any]
CommitFn = Callable[[Record], None]
RejectFn = Callable[[Record, str], None]
ManagerFactory = Callable[[], Any]


def handle_message(
    record: Record,
    *,
    manager_factory: ManagerFactory,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> dict[str, Any]:
    """Handle one queued job and decide commit/no-commit."""
    try:
        payload = _get_record_payload(record)
        provider, message = parse_job_payload(payload)
        manager = manager_factory()
        manager.set_provider_by_shortname(provider)
    except Exception as exc:
        error = f"parse_failed: {exc}"
        if reject is not None:
            reject(record, error)
        return {
            "status": "parse_failed",
            "record_meta": _record_meta(record),
            "job_id": None,
            "sending_status": None,
            "should_commit": False,
            "error": error,
        }

    error = None
    try:
        sending_status = manager.send(message)
    except Exception as exc:
        sending_status = {"success": False, "message": str(exc)}
        error = f"send_failed: {exc}"
    commit(record)

    return {
        "status": "processed_and_committed",
        "record_meta": _record_meta(record),
        "job_id": payload.get("job_id"),
        "provider": provider,
        "sending_status": sending_status,
        "should_commit": True,
        "error": error,
    }


def handle_batch(
    records: Sequence[Record],
    *,
    manager_factory: ManagerFactory,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> list[dict[str, Any]]:
    """Handle a batch of records sequentially using `handle_message`."""
    results: list[dict[str, Any]] = []
    for record in records:
        result = handle_message(
            record,
            manager_factory=manager_factory,
            commit=commit,
            reject=reject,
        )
        results.append(result)
    return results


def _get_record_payload(record: Record) -> dict[str, Any]:
    payload = record.get("value")
    if not isinstance(payload, dict):
        raise ValueError("record.value must be a dict payload")
    return payload


def _record_meta(record: Record) -> dict[str, Any]:
    return {
        "topic": record.get("topic"),
        "partition": record.get("partition"),
        "offset": record.get("offset"),
    }
