import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"

# The pet store lives in process memory; extra worker processes would each
# hold their own diverging copy.
workers = 1
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "90") or 90)

worker_class = "uvicorn.workers.UvicornWorker"
wsgi_app = "app:app"
