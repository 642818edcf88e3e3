import logging

from app.cache import cache_region


class BaseTask:

    def before(self):
        pass

    def after(self):
        pass

    def post(self):
        pass

    def run(self):
        try:
            logging.info("job start: %s", type(self).__name__)
            self.before()
            self.post()
        except Exception as e:
            logging.exception("job failed: %s: %s", type(self).__name__, e)
        finally:
            logging.info("job done: %s", type(self).__name__)
            self.after()

    def cache_region(self):
        return cache_region
