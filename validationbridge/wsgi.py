"""
Client Validation Bridge - WSGI Application

This module:
- Initializes Django settings
- Validates environment configuration before serving
- Exposes ``application`` for Gunicorn
"""

import os
import sys
import logging

# Configure logging early for startup diagnostics
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "validationbridge.settings")

try:
    from validationbridge.env_validation import validate_env
    validate_env()
except Exception as e:
    logger.critical(f"Environment validation failed: {e}")
    sys.exit(1)

try:
    from django.core.wsgi import get_wsgi_application
    application = get_wsgi_application()
except Exception as e:
    logger.critical(f"Failed to initialize Django WSGI: {e}")
    sys.exit(1)

if __name__ == "__main__":
    logger.warning("Running WSGI app directly (should use Gunicorn in production)")
