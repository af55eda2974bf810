"""Gunicorn configuration for production.

Run with: gunicorn -c gunicorn.conf.py 'halal_finance:create_app()'
"""
import os

# Server socket
bind = os.environ.get('BIND', '0.0.0.0:8080')

# Worker processes
workers = int(os.environ.get('WEB_CONCURRENCY', '2'))
worker_class = 'gthread'
threads = 4
timeout = 45
keepalive = 2

# Logging
accesslog = '-'
errorlog = '-'
loglevel = os.environ.get('LOG_LEVEL', 'info')

# Process naming
proc_name = 'halal-finance'
