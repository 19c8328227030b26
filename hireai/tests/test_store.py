import json

import pytest

from hireai.models import Job, JobType
from hireai.store import FileSlot, JobStore, MemorySlot, filter_jobs


def _job(job_id="new", title="X", company="Co", job_type=JobType.CONTRACT):
    return Job(
        id=job_id,
        title=title,
        company=company,
        location="Remote",
        type=job_type,
        salary_range="",
        description="d",
        posted_at=1,
    )


def test_absent_key_seeds_two_jobs_and_writes_them(store, slot):
    assert [j.id for j in store.jobs] == ["1", "2"]
    saved = json.loads(slot.get("hireai_jobs"))
    assert [d["title"] for d in saved] == ["Senior Frontend Engineer", "Product Designer"]


def test_saved_list_wins_over_seed():
    slot = MemorySlot({"hireai_jobs": json.dumps([_job("a").to_dict()])})
    assert [j.id for j in JobStore(slot).jobs] == ["a"]


@pytest.mark.parametrize("saved", ["{not json", "42", json.dumps([{"title": "no id"}])])
def test_unreadable_slot_falls_back_to_seed(saved, caplog):
    slot = MemorySlot({"hireai_jobs": saved})
    with caplog.at_level("ERROR"):
        store = JobStore(slot)
    assert [j.id for j in store.jobs] == ["1", "2"]
    assert "unreadable" in caplog.text
    assert slot.get("hireai_jobs") == saved

    store.prepend(_job("b"))
    assert [d["id"] for d in json.loads(slot.get("hireai_jobs"))] == ["b", "1", "2"]


def test_prepend_puts_new_job_first_and_keeps_the_rest(store):
    before = store.jobs
    store.prepend(_job(title="X"))
    after = store.jobs
    assert after[0].title == "X"
    assert after[1:] == before


def test_prepend_persists_immediately(store, slot):
    store.prepend(_job())
    saved = json.loads(slot.get("hireai_jobs"))
    assert saved[0]["id"] == "new"
    assert len(saved) == 3


def test_duplicate_id_rejected(store):
    with pytest.raises(ValueError):
        store.prepend(_job("1"))


def test_jobs_returns_a_copy(store):
    store.jobs.clear()
    assert len(store) == 2


def test_get(store):
    assert store.get("2").title == "Product Designer"
    assert store.get("missing") is None


def test_file_slot_round_trip_and_repeated_reads(tmp_path):
    first = JobStore(FileSlot(tmp_path))
    first.prepend(_job(title="Persisted"))

    reads = [JobStore(FileSlot(tmp_path)).jobs for _ in range(3)]
    assert reads[0] == reads[1] == reads[2]
    assert reads[0][0].title == "Persisted"
    assert reads[0] == first.jobs
    assert (tmp_path / "hireai_jobs.json").exists()


def test_file_slot_missing_key(tmp_path):
    assert FileSlot(tmp_path / "nowhere").get("hireai_jobs") is None


def test_storage_shape_uses_browser_keys():
    job = _job()
    job.apply_link = "https://apply"
    data = job.to_dict()
    assert data["salaryRange"] == ""
    assert data["postedAt"] == 1
    assert data["type"] == "Contract"
    assert data["applyLink"] == "https://apply"
    assert "imageUrl" not in data
    assert Job.from_dict(data) == job


def test_unknown_type_falls_back_to_full_time():
    data = _job().to_dict()
    data["type"] = "Freelance"
    assert Job.from_dict(data).type is JobType.FULL_TIME


def test_filter_by_term_and_type(store):
    store.prepend(_job("c", title="Contract Writer", company="Words Ltd", job_type=JobType.CONTRACT))
    jobs = store.jobs
    assert [j.id for j in filter_jobs(jobs, "techflow")] == ["1"]
    assert [j.id for j in filter_jobs(jobs, "DESIGNER")] == ["2"]
    assert [j.id for j in filter_jobs(jobs, "", "Contract")] == ["c"]
    assert [j.id for j in filter_jobs(jobs, "writer", "Full-time")] == []
    assert len(filter_jobs(jobs)) == 3
