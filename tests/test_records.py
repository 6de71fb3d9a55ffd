# tests/test_records.py
"""
Records tests
=============

Does: Cover the record document mapping, both repositories, CSV/JSON
      interchange, the capture/session/recheck/edit workflows and history search.
"""

from __future__ import annotations

import csv
import io
import json
from importlib import import_module

import pytest

color = import_module("chroma_compare.color")
errors = import_module("chroma_compare.errors")
model = import_module("chroma_compare.records.model")
repository = import_module("chroma_compare.records.repository")
interchange = import_module("chroma_compare.records.interchange")
workflows = import_module("chroma_compare.records.workflows")
search = import_module("chroma_compare.records.search")
settings_mod = import_module("chroma_compare.general.utils.settings")

SETTINGS = dict(settings_mod.DEFAULT_SETTINGS)

RED = color.make_color_data((255, 0, 0))
BLUE = color.make_color_data((0, 0, 255))
PURPLE = color.make_color_data((128, 0, 128), avg_rgb=(120.5, 3.25, 130.0))


def _session(sample=PURPLE) -> "workflows.ComparisonSession":
    s = workflows.ComparisonSession.from_settings(SETTINGS)
    s.assign("A", RED)
    s.assign("B", BLUE)
    s.assign("sample", sample)
    return s


def _record(ts: int = 1_700_000_000_000, **changes) -> "model.ComparisonRecord":
    rec = _session().build_record(thumbnail="data:image/jpeg;base64,AAAA", now=ts)
    for k, v in changes.items():
        setattr(rec, k, v)
    return rec


def _rgba(rgb, count):
    return bytes(list(rgb) + [255]) * count


# ──────────────────────────────────────────────────────────────────────────────
# Model mapping
# ──────────────────────────────────────────────────────────────────────────────
def test_record_document_uses_camel_case_keys():
    doc = model.record_to_dict(_record())
    assert set(doc) == {
        "id", "timestamp", "title", "refA", "refB", "sample",
        "metrics", "notes", "feedback", "thumbnail",
    }
    assert doc["refA"]["name"] == "Reference A"
    assert doc["sample"]["avgRgb"] == {"r": 120.5, "g": 3.25, "b": 130.0}
    assert set(doc["metrics"]) == {"dA", "dB", "towardA", "towardB", "separation", "separationLabel"}


def test_record_document_round_trips_optional_fields():
    rec = _record(last_checked_at=5, previous_metrics=_record().metrics, feedback="liked")
    back = model.record_from_dict(json.loads(json.dumps(model.record_to_dict(rec))))
    assert back == rec


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("metrics"),
        lambda d: d["refA"].pop("color"),
        lambda d: d.__setitem__("feedback", "meh"),
        lambda d: d["sample"]["lab"].__setitem__("l", "dark"),
    ],
)
def test_record_from_dict_rejects_malformed(mutate):
    doc = model.record_to_dict(_record())
    mutate(doc)
    with pytest.raises(errors.RecordImportError):
        model.record_from_dict(doc)


def test_record_from_dict_rejects_non_object():
    with pytest.raises(errors.RecordImportError):
        model.record_from_dict(["not", "a", "record"])


# ──────────────────────────────────────────────────────────────────────────────
# Repositories
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture(params=["memory", "file"])
def repo(request, tmp_path):
    if request.param == "memory":
        return repository.InMemoryRecordRepository()
    return repository.JsonFileRecordRepository(tmp_path / "store" / "records.json")


def test_repository_contract(repo):
    old, new = _record(ts=1000), _record(ts=2000)
    repo.save(old)
    repo.save(new)
    assert [r.id for r in repo.get_all()] == [new.id, old.id]

    repo.delete(old.id)
    assert [r.id for r in repo.get_all()] == [new.id]
    repo.delete("missing-id")

    repo.clear_all()
    assert repo.get_all() == []


def test_repository_save_overwrites_same_id(repo):
    rec = _record()
    repo.save(rec)
    repo.save(workflows.update_record(repo, rec, notes="second look"))
    (only,) = repo.get_all()
    assert only.notes == "second look"


def test_file_repository_persists_across_instances(tmp_path):
    path = tmp_path / "records.json"
    rec = _record()
    repository.JsonFileRecordRepository(path).save(rec)
    assert repository.JsonFileRecordRepository(path).get_all() == [rec]
    assert rec.id in json.loads(path.read_text(encoding="utf-8"))


def test_file_repository_missing_file_is_empty(tmp_path):
    assert repository.JsonFileRecordRepository(tmp_path / "none.json").get_all() == []


def test_file_repository_corrupt_store_raises_typed_error(tmp_path):
    path = tmp_path / "records.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(errors.RecordImportError):
        repository.JsonFileRecordRepository(path).get_all()


# ──────────────────────────────────────────────────────────────────────────────
# Interchange
# ──────────────────────────────────────────────────────────────────────────────
def test_export_csv_headers_and_formatting():
    rec = _record(ts=0, notes="warm, slightly pink", feedback=None)
    text = interchange.export_csv([rec])
    rows = list(csv.reader(io.StringIO(text)))
    assert tuple(rows[0]) == interchange.CSV_HEADERS
    row = dict(zip(rows[0], rows[1]))
    assert row["Timestamp"] == "1970-01-01T00:00:00.000Z"
    assert row["RefA_Hex"] == "#ff0000" and row["RefB_Hex"] == "#0000ff"
    assert row["Sample_Hex"] == "#800080"
    assert row["DeltaE_A"] == f"{rec.metrics.d_a:.3f}"
    assert row["TowardA_Pct"] == f"{rec.metrics.toward_a:.1f}"
    assert row["Feedback"] == "unrated"
    assert row["Notes"] == "warm; slightly pink"


def test_export_then_import_json_restores_records():
    src = repository.InMemoryRecordRepository()
    recs = [_record(ts=1000, feedback="disliked"), _record(ts=2000, notes="ok")]
    text = interchange.export_json(recs)
    assert isinstance(json.loads(text), list)

    assert interchange.import_json(src, text) == 2
    assert sorted(src.get_all(), key=lambda r: r.timestamp) == recs


@pytest.mark.parametrize("text", ["{not json", json.dumps({"id": "x"})])
def test_import_json_rejects_bad_documents(text):
    with pytest.raises(errors.RecordImportError):
        interchange.import_json(repository.InMemoryRecordRepository(), text)


def test_import_json_is_all_or_nothing():
    repo = repository.InMemoryRecordRepository()
    good = model.record_to_dict(_record())
    bad = dict(good, id="bad")
    bad.pop("sample")
    with pytest.raises(errors.RecordImportError):
        interchange.import_json(repo, json.dumps([good, bad]))
    assert repo.get_all() == []


def test_export_filename():
    assert interchange.export_filename("csv", now_ms=42) == "chroma_compare_42.csv"
    assert interchange.export_filename("json", "mine", now_ms=7) == "mine_7.json"
    with pytest.raises(ValueError):
        interchange.export_filename("xml", now_ms=1)


# ──────────────────────────────────────────────────────────────────────────────
# Workflows
# ──────────────────────────────────────────────────────────────────────────────
def test_capture_color_uses_median_and_keeps_mean():
    pixels = _rgba((200, 10, 10), 3) + _rgba((255, 255, 255), 1)
    c = workflows.capture_color(pixels, 2, 2, settings=SETTINGS)
    assert c.hex == "#c80a0a"
    assert c.avg_rgb.r == pytest.approx((200 * 3 + 255) / 4)
    assert c.lab == color.rgb_to_lab(c.rgb)


@pytest.mark.parametrize("w,h", [(1, 5), (5, 1), (0, 0)])
def test_capture_color_rejects_small_selection(w, h):
    with pytest.raises(errors.SelectionTooSmall):
        workflows.capture_color(_rgba((1, 2, 3), w * h), w, h, settings=SETTINGS)


def test_session_metrics_need_all_three_slots():
    s = workflows.ComparisonSession.from_settings(SETTINGS)
    s.assign("A", RED)
    s.assign("B", BLUE)
    assert s.metrics is None and not s.is_complete
    with pytest.raises(errors.InvalidInput):
        s.build_record()
    s.assign("sample", RED)
    assert s.metrics.toward_a == pytest.approx(100.0)
    assert s.metrics.separation_label == "Strong"


def test_session_assign_and_rename_validate_slots():
    s = workflows.ComparisonSession()
    with pytest.raises(errors.InvalidInput):
        s.assign("C", RED)
    s.rename("A", "Swatch 1")
    assert s.ref_a_name == "Swatch 1"
    with pytest.raises(errors.InvalidInput):
        s.rename("sample", "nope")


def test_save_comparison_builds_titled_record():
    repo = repository.InMemoryRecordRepository()
    s = _session()
    s.rename("B", "Navy")
    rec = workflows.save_comparison(repo, s, thumbnail="thumb", now=1_700_000_000_000)
    assert repo.get_all() == [rec]
    assert rec.title.startswith("Comparison - ")
    assert rec.ref_b.name == "Navy"
    assert rec.metrics == color.classify(PURPLE, RED, BLUE)
    assert rec.feedback is None and rec.notes == "" and rec.thumbnail == "thumb"
    assert rec.previous_metrics is None and rec.last_checked_at is None


def test_recheck_moves_old_metrics_to_previous():
    repo = repository.InMemoryRecordRepository()
    stale = color.ComparisonMetrics(1.0, 2.0, 10.0, 90.0, 80.0, "Strong")
    rec = _record(metrics=stale)
    repo.save(rec)

    updated = workflows.recheck(repo, rec, now=99)
    assert updated.previous_metrics == stale
    assert updated.metrics == color.classify(rec.sample, rec.ref_a.color, rec.ref_b.color)
    assert updated.last_checked_at == 99
    assert repo.get_all() == [updated]
    assert rec.metrics == stale


def test_recheck_all_stamps_every_record():
    repo = repository.InMemoryRecordRepository()
    for ts in (1, 2, 3):
        repo.save(_record(ts=ts))
    out = workflows.recheck_all(repo, now=50)
    assert len(out) == 3
    assert all(r.last_checked_at == 50 and r.previous_metrics is not None for r in out)


def test_update_record_and_toggle_feedback():
    repo = repository.InMemoryRecordRepository()
    rec = _record()
    rec = workflows.update_record(repo, rec, title="Paint test", notes="kitchen")
    assert (rec.title, rec.notes, rec.feedback) == ("Paint test", "kitchen", None)

    rec = workflows.toggle_feedback(repo, rec, "liked")
    assert rec.feedback == "liked"
    rec = workflows.toggle_feedback(repo, rec, "disliked")
    assert rec.feedback == "disliked"
    rec = workflows.toggle_feedback(repo, rec, "disliked")
    assert rec.feedback is None
    assert repo.get_all()[0].title == "Paint test"

    with pytest.raises(errors.InvalidInput):
        workflows.update_record(repo, rec, feedback="love")


# ──────────────────────────────────────────────────────────────────────────────
# Search
# ──────────────────────────────────────────────────────────────────────────────
def test_filter_records_by_query_and_feedback():
    a = _record(ts=1, title="Comparison - red vs blue", notes="", feedback="liked")
    b = _record(ts=2, title="Wall paint", notes="Living room sample", feedback=None)
    c = _record(ts=3, title="Fabric", notes="", feedback="disliked")

    assert search.filter_records([a, b, c]) == [c, b, a]
    assert search.filter_records([a, b, c], query="RED") == [a]
    assert search.filter_records([a, b, c], query="living") == [b]
    assert search.filter_records([a, b, c], feedback="liked") == [a]
    assert search.filter_records([a, b, c], feedback="disliked") == [c]
    assert search.filter_records([a, b, c], query="zzzz") == []


def test_filter_records_tolerates_typos():
    a = _record(title="Comparison - red vs blue")
    assert search.matches_query(a, "comparsion")
    assert not search.matches_query(a, "comparsion", min_score=99)


def test_filter_records_rejects_unknown_feedback_filter():
    with pytest.raises(ValueError):
        search.filter_records([], feedback="maybe")


def test_delete_record_and_clear_history():
    repo = repository.InMemoryRecordRepository()
    keep, drop = _record(ts=1), _record(ts=2)
    repo.save(keep)
    repo.save(drop)

    assert workflows.delete_record(repo, drop.id) is True
    assert workflows.delete_record(repo, drop.id) is False
    assert repo.get_all() == [keep]

    repo.save(drop)
    assert workflows.clear_history(repo) == 2
    assert repo.get_all() == []
    assert workflows.clear_history(repo) == 0
