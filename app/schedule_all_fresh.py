import logging

from app.schedule import run_inflation_task

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

if __name__ == '__main__':

    logging.info("RUN inflation")
    run_inflation_task()

    logging.info("Refresh done.")
