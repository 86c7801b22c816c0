from gym_api.workers import scheduler


def test_scheduler_registers_membership_expiry_job():
    jobs = scheduler.get_scheduler().get_jobs()

    assert [job.func for job in jobs] == [scheduler.expire_memberships]


def test_expire_memberships_job_uses_its_own_session(monkeypatch):
    calls = []

    class FakeSession:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr(scheduler, "SessionLocal", FakeSession)
    monkeypatch.setattr(
        scheduler.member_service,
        "expire_memberships",
        lambda db: calls.append(db) or 0,
    )

    scheduler.expire_memberships()

    assert len(calls) == 1
    assert isinstance(calls[0], FakeSession)
