import logging
import time

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.jobstores.sqlalchemy import SQLAlchemyJobStore
from apscheduler.schedulers.background import BackgroundScheduler

from app.settings import SCHEDULER_JOBSTORE_URL, INFLATION_TASK_INTERVAL
from app.tasks.inflation import InflationTask

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def run_inflation_task():
    InflationTask().run()


def create_scheduler(jobstore_url=SCHEDULER_JOBSTORE_URL):
    jobstores = {'default': SQLAlchemyJobStore(url=jobstore_url)}
    executors = {'default': ThreadPoolExecutor(2)}
    job_defaults = {'coalesce': True, 'max_instances': 1}

    return BackgroundScheduler(jobstores=jobstores, executors=executors, job_defaults=job_defaults, timezone='UTC')


def add_jobs(scheduler, interval=INFLATION_TASK_INTERVAL):
    # textual reference, so the stored job does not point at __main__ when run with python -m
    scheduler.add_job('app.schedule:run_inflation_task', 'interval', minutes=interval, id='inflation',
                      replace_existing=True)


if __name__ == '__main__':

    scheduler = create_scheduler()
    scheduler.start()

    logging.info('RUN - inflation ----------------------------')
    run_inflation_task()

    add_jobs(scheduler)

    while True:
        time.sleep(120)
