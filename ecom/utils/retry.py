# ecom/utils/retry.py
import logging

from sqlalchemy.exc import OperationalError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ecom.utils.logging import get_logger
from ecom.utils.settings import DB_CONNECT_RETRIES

logger = get_logger(__name__)


#baza w kontenerze moze jeszcze nie przyjmowac polaczen
def db_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_CONNECT_RETRIES),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
