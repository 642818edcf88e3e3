from app import schedule


def test_inflation_job_is_scheduled():
    scheduler = schedule.create_scheduler('sqlite://')

    schedule.add_jobs(scheduler, interval=15)

    jobs = scheduler.get_jobs()
    assert [job.id for job in jobs] == ['inflation']
    assert jobs[0].func is schedule.run_inflation_task
    assert jobs[0].func_ref == 'app.schedule:run_inflation_task'
    assert jobs[0].trigger.interval.total_seconds() == 15 * 60


def test_run_inflation_task(monkeypatch):
    runs = []
    monkeypatch.setattr(schedule.InflationTask, 'run', lambda self: runs.append(self))

    schedule.run_inflation_task()

    assert len(runs) == 1
