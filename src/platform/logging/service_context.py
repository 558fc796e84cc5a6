"""
Service context for log lines: `SERVICE_NAME@DEPLOY_ENV:instance`.

The instance is the container hostname when one is set (short form), the
process id otherwise, so lines from parallel workers stay distinguishable.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seat-inventory')
    deploy_env = os.getenv('DEPLOY_ENV', 'local')

    hostname = os.getenv('HOSTNAME', '')
    instance = hostname[:12] if hostname else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
