import logging
import time
from typing import Callable

from fastapi import Request


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(start_time * 1000)}-{id(request)}"

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = time.time() - start_time
        logger.error("[%s] %s %s - ERROR: %s - %.2fs", request_id, request.method, request.url.path, e, process_time)
        raise

    process_time = time.time() - start_time
    # Only log slow requests or errors
    if process_time > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info("[%s] %s %s - %s - %.2fs", request_id, request.method, request.url.path, response.status_code, process_time)
    return response
