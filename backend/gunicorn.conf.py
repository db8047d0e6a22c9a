import os

# Load with: gunicorn -c gunicorn.conf.py "navireg:create_app()"

# Bind & workers
bind = f"0.0.0.0:{os.getenv('PORT', '3001')}"
# A single process keeps the in-memory rate-limit counters exact; scale out with
# RATELIMIT_STORAGE_URI=redis://... before raising this.
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "8"))  # a slow upstream call only holds one thread
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Honor proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
