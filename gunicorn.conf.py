"""
Client Validation Bridge - Gunicorn WSGI Server Configuration
=============================================================

Requests are short, CPU-only rule builds served mostly from cache, so a
small pool of threaded workers is enough.
"""

import multiprocessing
import os
import logging

# =============================================================================
# ENVIRONMENT DETECTION
# =============================================================================

IS_PRODUCTION = os.getenv("PRODUCTION") == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# =============================================================================
# SERVER BINDING
# =============================================================================

PORT = int(os.getenv("PORT", 8000))
bind = [f"0.0.0.0:{PORT}"]

wsgi_app = "validationbridge.wsgi:application"


# =============================================================================
# WORKER CONFIGURATION
# =============================================================================

def calculate_workers():
    """Two workers per core plus one, capped for small hosts."""
    return min((multiprocessing.cpu_count() * 2) + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))

max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))


# =============================================================================
# TIMEOUT & RESOURCE LIMITS
# =============================================================================

timeout = 30
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190


# =============================================================================
# APPLICATION LOADING
# =============================================================================

# View models are discovered once in AppConfig.ready(); preloading shares that work.
preload_app = True
reload = os.getenv("GUNICORN_RELOAD", "false").lower() == "true"

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "*")


# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s '
    '"%(f)s" "%(a)s" response_time=%(D)s_us request_id=%({x-request-id}o)s'
)

proc_name = "validationbridge"


# =============================================================================
# STARTUP HOOKS
# =============================================================================

def when_ready(server):
    logger.info(f"Gunicorn READY at {server.address} with {workers} workers")


def on_exit(server):
    logger.info("Gunicorn shutting down gracefully...")
