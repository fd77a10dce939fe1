"""Driver mapping records from a JSON or NDJSON dump to triples."""

from __future__ import annotations

import datetime
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from urllib.parse import quote

import orjson
from pydantic import BaseModel, Field, ValidationError

from benangmerah_driver.driver import DriverBase
from benangmerah_driver.rdf import literal
from benangmerah_driver.rdf.namespaces import RDF

_NDJSON_SUFFIXES = {".ndjson", ".jsonl"}
_LIST_KEYS = ("records", "data", "items", "results")
# Reserved and already-escaped characters stay as they are in IRI values
_IRI_SAFE = ":/?#[]@!$&'()*+,;=%~"


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to it."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


class JsonRecordsOptions(BaseModel):
    path: Path
    base_uri: str = "http://benangmerah.net/resource/"
    id_field: str = "id"
    type_uri: str | None = None
    modified_field: str = "modified"
    predicates: dict[str, str] = Field(default_factory=dict)


class JsonRecordsDriver(DriverBase):
    """Emits one resource per record, one triple per mapped field.

    Record ids are percent-encoded into the subject IRI, so an id such as
    ``Kota Bandung`` becomes ``<base_uri>Kota%20Bandung``.

    With ``last_fetched`` set, records whose modified field is not later than
    it are skipped.
    """

    @classmethod
    def default_options(cls) -> dict[str, Any]:
        return {
            "base_uri": "http://benangmerah.net/resource/",
            "id_field": "id",
            "modified_field": "modified",
            "predicates": {},
        }

    def fetch(self) -> None:
        try:
            opts = JsonRecordsOptions.model_validate(self.options)
        except ValidationError as exc:
            self.fail(exc)
            return

        try:
            records = list(self._read_records(opts.path))
        except (OSError, orjson.JSONDecodeError) as exc:
            self.fail(exc)
            return

        try:
            since = self.last_fetched_datetime
        except ValueError as exc:
            self.fail(exc)
            return

        emitted = skipped = 0
        for idx, record in records:
            if since is not None and not self._modified_after(record, opts, since):
                skipped += 1
                continue
            if self._emit_record(record, idx, opts):
                emitted += 1

        self.info(
            f"{emitted} records mapped from {opts.path}"
            + (f", {skipped} unchanged since {self.last_fetched}" if skipped else "")
        )
        self.finish()

    def _read_records(self, path: Path) -> Iterator[tuple[int, dict]]:
        if path.suffix.lower() in _NDJSON_SUFFIXES:
            yield from self._read_ndjson(path)
            return

        data = orjson.loads(path.read_bytes())
        if isinstance(data, dict):
            for key in _LIST_KEYS:
                if isinstance(data.get(key), list):
                    data = data[key]
                    break
            else:
                data = [data]
        if not isinstance(data, list):
            self.warn(f"{path} holds no JSON records")
            return
        for idx, obj in enumerate(data, start=1):
            if isinstance(obj, dict):
                yield idx, obj

    def _read_ndjson(self, path: Path) -> Iterator[tuple[int, dict]]:
        with path.open("rb") as fh:
            for line_num, line in enumerate(fh, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    obj = orjson.loads(line)
                except orjson.JSONDecodeError:
                    self.warn(f"Skipping invalid JSON at line {line_num}")
                    continue
                if isinstance(obj, dict):
                    yield line_num, obj

    def _modified_after(
        self, record: dict, opts: JsonRecordsOptions, since: datetime.datetime
    ) -> bool:
        raw = record.get(opts.modified_field)
        if not raw:
            # Undated records are always refetched
            return True
        try:
            modified = datetime.datetime.fromisoformat(str(raw))
        except ValueError:
            self.warn(f"Unparseable {opts.modified_field} value {raw!r}")
            return True
        return _as_utc(modified) > _as_utc(since)

    def _emit_record(self, record: dict, idx: int, opts: JsonRecordsOptions) -> bool:
        record_id = record.get(opts.id_field)
        if record_id in (None, ""):
            self.warn(f"Record {idx} has no {opts.id_field!r}, skipped")
            return False

        subject = f"{opts.base_uri}{quote(str(record_id), safe='')}"
        if opts.type_uri:
            self.add_triple(subject, str(RDF.type), opts.type_uri)
        for field, predicate in opts.predicates.items():
            value = record.get(field)
            values = value if isinstance(value, list) else [value]
            for item in values:
                if item is None:
                    continue
                self.add_triple(subject, predicate, self._object_term(item))
        self.debug(f"Mapped record {record_id}")
        return True

    @staticmethod
    def _object_term(value: Any) -> str:
        if isinstance(value, str) and value.startswith(("http://", "https://")):
            return quote(value, safe=_IRI_SAFE)
        if isinstance(value, (dict, list)):
            return literal(orjson.dumps(value).decode())
        return literal(value)


def main() -> None:
    """Entry point for ``bm-json-records``."""
    JsonRecordsDriver.run_cli()
