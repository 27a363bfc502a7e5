"""Dataset validation - schema conformance and referential integrity.

The scoring and metrics engines tolerate dangling references by dropping
them; this is where they are reported.
"""

from collections import Counter
from datetime import datetime, timezone

from pydantic import BaseModel, ValidationError

from kalkulacka_client.polls import PollSchema
from kalkulacka_client.reference import IssueSchema, PartyPositionSchema, PartySchema, ThesisSchema
from settings import ISSUES_FILE, PARTIES_FILE, POLLS_FILE, POSITIONS_FILE, THESES_FILE

SCHEMAS: dict[str, type[BaseModel]] = {
    PARTIES_FILE: PartySchema,
    ISSUES_FILE: IssueSchema,
    THESES_FILE: ThesisSchema,
    POSITIONS_FILE: PartyPositionSchema,
    POLLS_FILE: PollSchema,
}


def parse_records(filename: str, records: list) -> tuple[list, list[str]]:
    """Validate records against the schema of a dataset file. Returns (models, errors)."""
    schema = SCHEMAS[filename]
    models, errors = [], []

    if not isinstance(records, list):
        return [], [f"{filename}: expected a JSON array"]

    for i, record in enumerate(records):
        try:
            models.append(schema.model_validate(record))
        except ValidationError as e:
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"])
                errors.append(f"{filename}[{i}].{loc}: {err['msg']}")

    return models, errors


def validate_datasets(data: dict[str, list], now: datetime | None = None) -> dict:
    """Validate loaded datasets keyed by file name."""
    now = now or datetime.now(timezone.utc)
    issues: list[str] = []
    warnings: list[str] = []
    stats: dict[str, int | float] = {}

    parsed = {}
    for filename in SCHEMAS:
        if filename not in data:
            if filename != POLLS_FILE:
                issues.append(f"{filename}: missing")
            continue
        models, errors = parse_records(filename, data[filename])
        parsed[filename] = models
        issues.extend(errors)
        stats[filename.removesuffix(".json")] = len(models)

    party_ids = {p.id for p in parsed.get(PARTIES_FILE, [])}
    thesis_ids = {t.id for t in parsed.get(THESES_FILE, [])}
    issue_ids = {i.id for i in parsed.get(ISSUES_FILE, [])}
    positions = parsed.get(POSITIONS_FILE, [])

    if ISSUES_FILE in parsed:
        for thesis in parsed.get(THESES_FILE, []):
            if thesis.issue_id not in issue_ids:
                issues.append(f"Thesis {thesis.id} references unknown issue {thesis.issue_id}")

    for position in positions:
        if position.party_id not in party_ids:
            issues.append(f"Position {position.party_id}/{position.thesis_id} references unknown party")
        if position.thesis_id not in thesis_ids:
            issues.append(f"Position {position.party_id}/{position.thesis_id} references unknown thesis")

    duplicates = Counter((p.party_id, p.thesis_id) for p in positions)
    for (party_id, thesis_id), count in duplicates.items():
        if count > 1:
            warnings.append(f"Duplicate position {party_id}/{thesis_id} ({count}x), first occurrence is used")

    for position in positions:
        moment = position.to_entity().resolved_timestamp()
        if moment is not None and moment > now:
            warnings.append(f"Position {position.party_id}/{position.thesis_id} is dated in the future")

    for poll in parsed.get(POLLS_FILE, []):
        for result in poll.results:
            if party_ids and result.party_id not in party_ids:
                warnings.append(f"Poll {poll.id} references unknown party {result.party_id}")

    possible = len(party_ids) * len(thesis_ids)
    covered = len({(p.party_id, p.thesis_id) for p in positions})
    stats["coverage_pct"] = round(covered / possible * 100, 1) if possible else 0

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
        "warnings": warnings,
    }
